from .completer import ProblemCompleter
from .population import evaluate_population

__all__ = ["ProblemCompleter", "evaluate_population"]
