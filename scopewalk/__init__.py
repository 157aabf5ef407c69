"""
A tree-walking evaluator with lexical closures.
Start with executive.run_program, or see demo.py for a complete program.
"""
