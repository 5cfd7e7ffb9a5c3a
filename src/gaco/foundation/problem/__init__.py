"""Problem protocol, base class and benchmark problems."""

from .base import Problem
from .cec2006 import CEC2006G01Problem
from .hock_schittkowsky import HockSchittkowsky71Problem
from .inventory import InventoryProblem
from .minlp_rastrigin import MINLPRastriginProblem
from .rosenbrock import RosenbrockProblem
from .types import ProblemProtocol
from .zdt1 import ZDT1Problem

__all__ = [
    "Problem",
    "ProblemProtocol",
    "RosenbrockProblem",
    "HockSchittkowsky71Problem",
    "CEC2006G01Problem",
    "ZDT1Problem",
    "MINLPRastriginProblem",
    "InventoryProblem",
]
