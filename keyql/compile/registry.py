"""Dialect lookup for the statement builders.

Every builder resolves ``PersistConfig.dialect`` through
:class:`CompilerFactory` at ``build()`` time, so a dialect registered
after import is usable straight away.  keyQL registers ``mysql``,
``postgres`` and ``sqlite`` in :mod:`keyql`.

A dialect that only differs in quoting can subclass an existing
compiler::

    from keyql import CompilerFactory, MySQLCompiler, PersistenceFacade

    @CompilerFactory.register("mariadb")
    class MariaDBCompiler(MySQLCompiler):
        ...

    PersistenceFacade().delete("users", "id", 7, dialect="mariadb")
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar

from keyql.compile.base import SQLCompiler
from keyql.errors import CompilationError


class CompilerFactory:
    """Maps a dialect name to the :class:`SQLCompiler` subclass that renders it.

    The mapping is class-level and shared by the whole process.  Each
    :meth:`create` call returns a new compiler carrying the requested
    ``version``; compilers hold no other state.

    Example::

        compiler = CompilerFactory.create("sqlite", version="3.45")
        compiler.param_placeholder()   # '?'
        compiler.version               # '3.45'
    """

    _compilers: ClassVar[dict[str, type[SQLCompiler]]] = {}

    @classmethod
    def register(cls, name: str) -> Callable[[type[SQLCompiler]], type[SQLCompiler]]:
        """Class decorator form of :meth:`register_class`.

        Registering an existing ``name`` again replaces its compiler.
        """

        def decorator(compiler_cls: type[SQLCompiler]) -> type[SQLCompiler]:
            cls._compilers[name] = compiler_cls
            return compiler_cls

        return decorator

    @classmethod
    def register_class(cls, name: str, compiler_cls: type[SQLCompiler]) -> None:
        """Make ``compiler_cls`` the renderer for ``dialect=name``."""
        cls._compilers[name] = compiler_cls

    @classmethod
    def create(cls, name: str, version: str | None = None) -> SQLCompiler:
        """Return a new compiler for dialect ``name``.

        Args:
            name: Dialect name as given in ``PersistConfig.dialect``.
            version: Database version; stored on the compiler untouched.

        Raises:
            CompilationError: ``name`` was never registered.  The message
                lists the dialects that are.
        """
        compiler_cls = cls._compilers.get(name)
        if compiler_cls is None:
            registered = sorted(cls._compilers)
            raise CompilationError(
                f"Unsupported dialect: '{name}'. Registered dialects: {registered}."
            )
        return compiler_cls(version=version)

    @classmethod
    def registered_targets(cls) -> list[str]:
        """Return the sorted list of registered dialect names."""
        return sorted(cls._compilers)
