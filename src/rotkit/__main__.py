import sys

from rotkit import cli
from rotkit.utils.error_handling import capture_exceptions, handle_errors

capture_exceptions()


@handle_errors(exit_on_error=True)
def run() -> None:
    cli.main()


if __name__ == '__main__':
    try:
        run()
    except KeyboardInterrupt:
        print('\nOperation cancelled by user')  # noqa: T201
        sys.exit(130)
