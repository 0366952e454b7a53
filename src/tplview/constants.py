from __future__ import annotations

"""Project-wide constants used across modules.

This module isolates public constants to reduce cross-module coupling.
"""

# Reserved binding that carries a child's rendered output into its layout.
YIELD_NAME: str = 'yield'

# Reserved binding exposing the rendering Template to its own file.
VIEW_NAME: str = 'view'

# Marker phrase present in every inline diagnostic. Tests import it as
# `tplview.DIAGNOSTIC_MARKER`.
DIAGNOSTIC_MARKER: str = 'Error rendering template'

# Layout chains deeper than this are treated as a cycle.
MAX_LAYOUT_DEPTH: int = 16

# Fixed body of a failed response; never a traceback.
SERVER_ERROR_BODY: str = 'Internal Server Error'
NOT_FOUND_BODY: str = 'Not Found'
