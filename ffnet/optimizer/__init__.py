from .SupervisedTrainer import SupervisedTrainer
from .SGDTrainer import SGDTrainer

__all__ = ["SupervisedTrainer", "SGDTrainer"]
