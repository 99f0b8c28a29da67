"""Tests for the FastAPI import guard."""

from __future__ import annotations

import importlib
import sys
from unittest import mock


class TestImportGuard:
    def test_import_error_without_fastapi(self) -> None:
        """Importing the integration without fastapi raises ImportError."""
        with mock.patch.dict(sys.modules):
            for mod in [k for k in sys.modules if k.startswith("sqla_admin_decor.integrations")]:
                sys.modules.pop(mod)
            sys.modules["fastapi"] = None  # type: ignore[assignment]

            try:
                importlib.import_module("sqla_admin_decor.integrations.fastapi")
                raise AssertionError("Expected ImportError")  # pragma: no cover
            except ImportError as exc:
                assert "fastapi" in str(exc).lower()
                assert "pip install" in str(exc).lower()

    def test_import_succeeds_with_fastapi(self) -> None:
        from sqla_admin_decor.integrations.fastapi import (
            ResourceJSONDep,
            get_current_admin,
            install_error_handlers,
        )

        assert ResourceJSONDep is not None
        assert get_current_admin is not None
        assert install_error_handlers is not None
