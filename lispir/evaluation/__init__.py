from lispir.evaluation.evaluator import evaluate, evaluate_source, evaluate_sequence

__all__ = ["evaluate", "evaluate_source", "evaluate_sequence"]
