"""keyQL compilation layer: statement builders → prepared SQL."""
from keyql.compile.base import PreparedStatement, SQLCompiler
from keyql.compile.builders import DeleteBuilder, InsertBuilder, UpdateBuilder
from keyql.compile.mysql import MySQLCompiler
from keyql.compile.postgres import PostgresCompiler
from keyql.compile.registry import CompilerFactory
from keyql.compile.sqlite import SQLiteCompiler

__all__ = [
    "PreparedStatement",
    "SQLCompiler",
    "CompilerFactory",
    "InsertBuilder",
    "UpdateBuilder",
    "DeleteBuilder",
    "MySQLCompiler",
    "PostgresCompiler",
    "SQLiteCompiler",
]
