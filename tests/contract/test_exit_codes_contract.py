from __future__ import annotations

from sheetchart.cli import EXIT_FATAL, EXIT_PARTIAL_FAILURE, EXIT_SUCCESS_ALL

"""Exit code contract.

0 = all sources prepared, 2 = partial failure (one or more sources failed),
1 = fatal (config / arguments).
"""


def test_exit_code_constants():
    assert EXIT_SUCCESS_ALL == 0
    assert EXIT_PARTIAL_FAILURE == 2
    assert EXIT_FATAL == 1
