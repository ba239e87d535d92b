import logging
import textwrap

import pytest


@pytest.fixture
def arithmetic_source() -> str:
    """A small program exercising every statement kind."""
    return textwrap.dedent(
        """\
        signature add(a: number, b: number) -> number
        example add(2, 3) = 5
        example add(10, 0) = 10
        signature concat(parts: list[string]) -> string
        example concat(["a"]) = "a"
        example square(4) = 16
        add(add(1, 2), 3)
        """
    )


@pytest.fixture(autouse=True)
def reset_mirror_logger():
    """Remove handlers the CLI attaches so tests stay independent."""
    yield
    package_logger = logging.getLogger("mirror")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    package_logger.propagate = True
    package_logger.setLevel(logging.NOTSET)
