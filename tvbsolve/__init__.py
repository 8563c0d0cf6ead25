from tvbsolve.polyroots import solve
from tvbsolve.polynomial import Polynomial, System, random_system
from tvbsolve.utils import DegeneracyError, InternalConsistencyError, InstabilityWarning, NumericInstabilityWarning
