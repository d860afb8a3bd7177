"""
Geographic calculators: great-circle distances, the closed-tour solver
adapter and the route ordering engine.
"""
