from blob import *
from errors import InvalidFormula, StepLimitExceeded
from stax import evaluate
from rich.markup import escape
import settings

USAGE = 'usage: stax FORMULA [CONFIG]'

def main(argv=None) -> int:
    argv = sys.argv[1:] if argv is None else argv

    if not 1 <= len(argv) <= 2:
        console.print(escape(USAGE))
        return 2

    formula, *path = argv
    try:
        config = settings.load(*path)
    except (ValueError, toml.TomlDecodeError) as e:
        console.print(f'[red]bad config:[/red] {escape(str(e))}')
        return 2

    sys.setrecursionlimit(max(sys.getrecursionlimit(), config.recursionlimit))

    try:
        print(evaluate(formula, **config.options()))
    except InvalidFormula as e:
        console.print(f'[red]invalid formula:[/red] {escape(str(e))}')
        return 1
    except StepLimitExceeded as e:
        console.print(f'[yellow]{escape(str(e))}[/yellow]')
        return 3
    except RecursionError:
        # only the S rule nests, and only as deep as the reduction it performs
        console.print(f'[yellow]gave up: reduction nests deeper than {sys.getrecursionlimit()} calls[/yellow]')
        return 3

    return 0

if __name__ == '__main__':
    sys.exit(main())
