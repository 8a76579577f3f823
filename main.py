from loguru import logger

from smart_list.cli import app


def main() -> None:
    logger.info("Application started")
    app()


if __name__ == "__main__":
    main()
