"""
The evaluation methods proper: one per kind of syntax.
Importing this module registers them with the evaluator.
"""

from . import syntax
from .stacking import Frame
from .evaluator import evaluate, execute, execute_all, Returning, attach_evaluation_methods
from .values import Function, Closure, is_truthy, display
from .primitive import PRIMITIVE_BINARY, PRIMITIVE_UNARY, SHORTCUT
from .diagnostics import NotCallable

###############################################################################

def _eval_literal(expr:syntax.Literal, frame:Frame):
	return expr.value

def _eval_lookup(expr:syntax.Lookup, frame:Frame):
	return frame.get(expr.name)

def _eval_assign(expr:syntax.Assign, frame:Frame):
	return frame.set(expr.name, evaluate(expr.expr, frame))

def _eval_bin_exp(expr:syntax.BinExp, frame:Frame):
	a = evaluate(expr.lhs, frame)
	b = evaluate(expr.rhs, frame)
	return PRIMITIVE_BINARY[expr.op](a, b)

def _eval_unary_exp(expr:syntax.UnaryExp, frame:Frame):
	return PRIMITIVE_UNARY[expr.op](evaluate(expr.arg, frame))

def _eval_shortcut_exp(expr:syntax.ShortCutExp, frame:Frame):
	lhs = evaluate(expr.lhs, frame)
	return lhs if is_truthy(lhs) == SHORTCUT[expr.op] else evaluate(expr.rhs, frame)

def _eval_call(expr:syntax.Call, frame:Frame):
	function = evaluate(expr.fn_exp, frame)
	if not isinstance(function, Function): raise NotCallable(function)
	args = [evaluate(a, frame) for a in expr.args]
	return function.apply(args, frame)

def _eval_lambda_form(expr:syntax.LambdaForm, frame:Frame):
	return Closure(frame, expr.function)

###############################################################################

def _exec_expr_stmt(stmt:syntax.ExprStmt, frame:Frame):
	evaluate(stmt.expr, frame)

def _exec_print(stmt:syntax.Print, frame:Frame):
	frame.root.emit(display(evaluate(stmt.expr, frame)))

def _exec_var_decl(stmt:syntax.VarDecl, frame:Frame):
	value = None if stmt.init is None else evaluate(stmt.init, frame)
	frame.define(stmt.name, value)

def _exec_fun_decl(stmt:syntax.FunDecl, frame:Frame):
	# The name goes into the very frame the closure captures, so the body can call itself.
	frame.define(stmt.name, Closure(frame, stmt.function))

def _exec_return(stmt:syntax.Return, frame:Frame):
	raise Returning(None if stmt.expr is None else evaluate(stmt.expr, frame))

def _exec_if(stmt:syntax.If, frame:Frame):
	if is_truthy(evaluate(stmt.if_part, frame)):
		execute(stmt.then_part, frame)
	elif stmt.else_part is not None:
		execute(stmt.else_part, frame)

def _exec_while(stmt:syntax.While, frame:Frame):
	while is_truthy(evaluate(stmt.condition, frame)):
		execute(stmt.body, frame)

def _exec_block(stmt:syntax.Block, frame:Frame):
	execute_all(stmt.statements, frame.child())

attach_evaluation_methods(globals())
