"""Performance benchmarks for descentopt.

Times steepest descent and BFGS on the bundled objectives and reports the
iteration and function-evaluation counts next to the wall-clock cost.
"""
