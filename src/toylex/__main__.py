import logging

from . import format_tokens, scan

logger = logging.getLogger(__name__)

SOURCE_FILE = "code.txt"


def main() -> None:
    logging.basicConfig(
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )

    try:
        with open(SOURCE_FILE, encoding="latin-1", newline="") as f:
            source = f.read()
    except OSError:
        logger.critical("Invalid File")
        raise SystemExit(1) from None

    tokens = scan(source, on_invalid=print)
    print(format_tokens(tokens))


if __name__ == "__main__":
    main()
