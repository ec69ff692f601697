"""Static site builder for the Loki4j Logback appender documentation.

This package renders the landing, help, and users pages of the appender's
website from ``config/site.yaml`` and exposes the CLI used by ``site
generate`` and ``site bump``.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from loki4j_site import main
>>> main()  # doctest: +SKIP
>>> from loki4j_site import app
>>> app(["generate"])  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
