from blob import *
from stax import MODES

class Settings(NamedTuple):
    mode: str = 'direct'
    limit: Optional[int] = None
    trace: bool = False
    progress: bool = False
    recursionlimit: int = 20_000

    def options(self) -> dict:
        "Keyword arguments for Stax"
        return dict(mode=self.mode, limit=self.limit, trace=self.trace, progress=self.progress)

DEFAULT_PATH = 'stax.toml'

def count(value) -> bool:
    # toml booleans are ints to python
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0

CHECKS = {
    'mode': (lambda value: value in MODES, f"one of {MODES}"),
    'limit': (count, "a whole number, 0 for no limit"),
    'trace': (lambda value: isinstance(value, bool), "true or false"),
    'progress': (lambda value: isinstance(value, bool), "true or false"),
    'recursionlimit': (count, "a whole number"),
}

def load(path=None) -> Settings:
    """
    Settings from the [stax] table of a toml file.

    A file named explicitly has to exist, the implicit one from STAX_CONFIG
    or the working directory may be absent, giving the defaults.
    """
    if path is not None and not os.path.exists(path):
        raise ValueError(f"no config file at {path}")

    path = path or os.environ.get('STAX_CONFIG') or DEFAULT_PATH
    if not os.path.exists(path):
        return Settings()

    table = toml.load(path).get('stax', {})

    for key, value in table.items():
        if key not in CHECKS:
            raise ValueError(f"unknown setting {key!r} in {path}")

        check, expected = CHECKS[key]
        if not check(value):
            raise ValueError(f"setting {key!r} in {path} should be {expected}, not {value!r}")

    # 0 is how a toml file says "no limit"
    if not table.get('limit'):
        table['limit'] = None

    return Settings(**table)
