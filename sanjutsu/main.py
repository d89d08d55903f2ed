import logging
from typing import Optional, TextIO

import click

from sanjutsu.errors import ParseError
from sanjutsu.parse import parse
from sanjutsu.token import Token
from sanjutsu.tokenize import tokenize


def format_token(token: Token) -> str:
    return f"{token.kind.name} {token.literal}".rstrip()


@click.command()
@click.argument("expression", required=False)
@click.option("-f", "--file", "source", type=click.File("r"), default="-")
@click.option("-o", "--output", type=click.File("w"), default="-")
@click.option("--tokens", is_flag=True, help="Print the token stream instead.")
@click.option("-v", "--verbose", is_flag=True)
def main(
    expression: Optional[str],
    source: TextIO,
    output: TextIO,
    tokens: bool,
    verbose: bool,
):
    logging.basicConfig(level=logging.DEBUG if verbose else logging.WARNING)
    if expression is None:
        expression = source.read()
    try:
        if tokens:
            result = "\n".join(format_token(token) for token in tokenize(expression))
        else:
            result = parse(expression).print()
    except ParseError as e:
        click.echo(f"error: {e}", err=True)
        raise SystemExit(1)

    output.write(result + "\n")


if __name__ == "__main__":
    main()
