import pytest

from arithmetic_tree import SymbolTable, reset_default_source
from arithmetic_tree.logging_system import LogLevel, configure_logging


class CountingSymbolTable(SymbolTable):
    """Records every name lookup"""

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.lookups = []

    def lookup_constant(self, name):
        self.lookups.append(name)
        return super().lookup_constant(name)

    def get_variable(self, name):
        self.lookups.append(name)
        return super().get_variable(name)


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(LogLevel.SILENT)
    yield
    configure_logging(LogLevel.SILENT)
    reset_default_source()


@pytest.fixture
def symbols():
    table = SymbolTable()
    table.create_variable('r', 10)
    table.create_variable('s', 5)
    return table


@pytest.fixture
def counting_symbols():
    table = CountingSymbolTable()
    table.create_variable('r', 10)
    table.create_variable('s', 5)
    return table
