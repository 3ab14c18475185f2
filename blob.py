import os, sys
from collections import deque
from typing import Optional, NamedTuple, Iterable
from itertools import chain, islice, accumulate

from tqdm import tqdm
from rich.console import Console
import toml

# diagnostics never share stdout with results
console = Console(stderr=True, highlight=False, soft_wrap=True)

def findfirst(f, xs):
    for ind, vx in enumerate(xs):
        if f(vx):
            return ind

    return None
