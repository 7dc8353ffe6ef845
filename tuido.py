#!/usr/bin/env python3
"""Thin loader delegating to the interface layer."""

import sys

from core.editor.interface import tuido_app as _tuido_app

if __name__ != "__main__":
    # When imported, expose the interface implementation directly.
    sys.modules[__name__] = _tuido_app
else:
    sys.exit(_tuido_app.main())
