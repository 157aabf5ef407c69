"""
The demonstration program, built as a tree the way a parser would build it.
Line numbers follow this source text:

	function fib(n) {
	    if (n < 2) return n;
	    return fib(n - 2) + fib(n - 1);
	}

	print(fib(10));

	function makeClosure() {
	    var a = 0;
	    function inner() {
	        a = a + 1;
	        return a;
	    }
	    return inner;
	}

	var inner = makeClosure();
	print(inner());
	print(inner());
	print(inner());
"""
from .syntax import (
	Statement, Literal, Lookup, Assign, BinExp, Call,
	ExprStmt, Print, VarDecl, FunDecl, Return, If,
)

def fib_declaration() -> FunDecl:
	def fib_of(k): return Call(Lookup("fib", 3), [BinExp(Lookup("n", 3), "-", Literal(k, 3), 3)], 3)
	return FunDecl("fib", ["n"], [
		If(BinExp(Lookup("n", 2), "<", Literal(2, 2), 2), Return(Lookup("n", 2), 2), line=2),
		Return(BinExp(fib_of(2), "+", fib_of(1), 3), 3),
	], 1)

def make_closure_declaration() -> FunDecl:
	inner = FunDecl("inner", [], [
		ExprStmt(Assign("a", BinExp(Lookup("a", 11), "+", Literal(1, 11), 11), 11), 11),
		Return(Lookup("a", 12), 12),
	], 10)
	return FunDecl("makeClosure", [], [
		VarDecl("a", Literal(0, 9), 9),
		inner,
		Return(Lookup("inner", 14), 14),
	], 8)

def fib_program(n:int=10) -> list[Statement]:
	return [fib_declaration(), Print(Call(Lookup("fib", 6), [Literal(n, 6)], 6), 6)]

def closure_program(calls:int=3) -> list[Statement]:
	program = [make_closure_declaration(), VarDecl("inner", Call(Lookup("makeClosure", 17), (), 17), 17)]
	for i in range(calls):
		program.append(Print(Call(Lookup("inner", 18+i), (), 18+i), 18+i))
	return program

def program(n:int=10, calls:int=3) -> list[Statement]:
	""" The whole demonstration: prints fib(n), then counts 1, 2, 3, ... """
	return fib_program(n) + closure_program(calls)
