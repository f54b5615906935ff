"""Chemical equation balancer.

Core contract:
- input: an equation as text, e.g. "Fe + H2SO4 = Fe2(SO4)3 + SO2 + H2O"
- workflow: parse -> atom-balance matrix -> integer elimination -> coefficients
- output: the balanced equation as text, or a ParserError / BalancerError
"""

from .balancer import Balancer, balance_equation
from .equation import Equation
from .errors import BalancerError, ChemBalanceError, ParserError
from .items import Element, Entity, Group
from .parser import Parser, parse_equation
