from .password_generator import PasswordGenerator, generate_password, find_weak_pattern
from .strength_scorer import score, calculate_entropy, classify
from .facade import generate_with_report, generate_batch, GenerationResult

__all__ = [
    "PasswordGenerator",
    "generate_password",
    "find_weak_pattern",
    "score",
    "calculate_entropy",
    "classify",
    "generate_with_report",
    "generate_batch",
    "GenerationResult",
]
