from .alignment import NULL, Alignment, SentencePair
from .baseline import CooccurrenceAligner
from .em import IterationReport
from .errors import AlignmentError, NumericDegeneracy, WarmStartUnavailable
from .lexicon import load_lexical_table, save_lexical_table
from .model_one import Model1Trainer
from .model_two import Model2Trainer
from .table import DistortionTable, SparseJointTable

__version__ = "0.1.0"
