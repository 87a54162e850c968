import os

TOKENS_FILE_ENV = "SOLIDITY_CHECKS_TOKENS_FILE"

current_path = os.path.abspath(os.path.dirname(__file__))
BUNDLED_TOKENS_FILE = os.path.join(current_path, "parser", "Solidity.tokens")


def tokens_file_path() -> str:
    """
    Path of the ANTLR `.tokens` file the default vocabulary is loaded from.

    `SOLIDITY_CHECKS_TOKENS_FILE` overrides the bundled Solidity vocabulary, e.g. to
    match the grammar version of the parser that produces the trees.
    """
    return os.getenv(TOKENS_FILE_ENV) or BUNDLED_TOKENS_FILE
