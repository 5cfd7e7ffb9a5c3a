from .population import EvaluationResult, evaluate_population_with_constraints

__all__ = ["EvaluationResult", "evaluate_population_with_constraints"]
