#!/usr/bin/env python3
import sys
from pathlib import Path

from budget.reporter import ErrorReporter
from budget.scanner import Scanner


def main() -> None:
    """Main entrypoint for the Budget scanner.

    This function is invoked if this __init__.py is executed directly, or via
    the budget CLI entrypoint. Every command scans its source and prints the
    resulting Tokens, one per line.

    With no arguments it will start an interactive prompt.

    If the argument is a file, it will be scanned.

    Otherwise, the following commands are provided:
    budget run_prompt <- Run the interactive prompt
    budget run <source_or_stdin> <- Scan a source string, - for stdin.
    budget run_file <file> <- Scan a Budget source at a given path.
    """

    # First argument in argv is always the script itself in Python
    if len(sys.argv) == 2:
        if sys.argv[1] == "run_prompt":
            run_prompt()
            return

        run_file(sys.argv[1])
    elif len(sys.argv) == 3:
        command = sys.argv[1]
        match command:
            case "run":
                source = sys.argv[2]
                if source == "-":
                    try:
                        source = sys.stdin.read()
                    except KeyboardInterrupt:
                        return

                reporter = ErrorReporter()
                run(source, reporter)
                if reporter.had_error:
                    sys.exit(65)
            case "run_file":
                run_file(sys.argv[2])
            case _:
                print(f"unrecognized command: {command}", file=sys.stderr)
                sys.exit(66)

    elif len(sys.argv) > 3:
        print("Usage: budget [command] [script]")
        sys.exit(64)
    else:
        run_prompt()


def run_file(path: str) -> None:
    script_path = Path(path)
    if not script_path.exists():
        print(f"File at {script_path} not found", file=sys.stderr)
        sys.exit(66)

    reporter = ErrorReporter()
    run(script_path.read_text(), reporter)

    # Indicate an error in the exit code.
    if reporter.had_error:
        sys.exit(65)


def run_prompt() -> None:
    reporter = ErrorReporter()
    try:
        while True:
            line = input("> ")

            if not line:
                break

            run(line, reporter)

            # Each line stands alone in an interactive session.
            reporter.reset()
    except (KeyboardInterrupt, EOFError):
        return


def run(source: str, reporter: ErrorReporter) -> None:
    tokens = Scanner(source, reporter).scan_tokens()

    # There is no parser yet, so just show what was scanned.
    for token in tokens:
        print(token)


if __name__ == "__main__":
    main()
