from .config import Start as Start
from .coro import Coro as Coro
from .coro import CoroRunning as CoroRunning
from .coro import ForeignAwait as ForeignAwait
from .coro import State as State
from .coro import YieldAfterExhausted as YieldAfterExhausted
from .coro import YieldError as YieldError
from .coro import YieldOutsideCoro as YieldOutsideCoro
from .yields import Yield as Yield
