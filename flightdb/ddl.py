from __future__ import annotations
from sqlalchemy.engine import make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError
from sqlalchemy.schema import CreateIndex, CreateTable
from .models import Base

def get_dialect(dialect_name: str):
    """Instantiate a SQLAlchemy dialect by name without loading its database driver."""
    try:
        return make_url(f"{dialect_name}://").get_dialect()()
    except (ArgumentError, NoSuchModuleError) as e:
        raise ValueError(f"Unknown SQL dialect: {dialect_name!r}") from e

def render_ddl(dialect_name: str = "postgresql") -> str:
    """Render the schema as a SQL script: all tables (parents first), then all indexes.

    Nothing is executed, so the output can be reviewed or handed to a DBA
    before any database exists.
    """
    dialect = get_dialect(dialect_name)
    tables = Base.metadata.sorted_tables

    statements = [str(CreateTable(table).compile(dialect=dialect)).strip() for table in tables]
    for table in tables:
        for index in sorted(table.indexes, key=lambda ix: ix.name):
            statements.append(str(CreateIndex(index).compile(dialect=dialect)).strip())

    header = f"-- Flight Delay DNA schema ({dialect.name})\n\n"
    return header + "".join(f"{stmt};\n\n" for stmt in statements)
