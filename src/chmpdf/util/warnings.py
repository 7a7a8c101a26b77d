"""
chmpdf/util/warnings
"""

from __future__ import annotations

import warnings
from typing import Type


class RenderWarning(RuntimeWarning):
    """
    Class for diagnostics emitted when a page component fails and rendering continues.
    """


def warn(message: str, category: Type[Warning] = RuntimeWarning, stacklevel: int = 2) -> None:
    """
    Emits a warning with a default stacklevel.

    Args:
        message (str): Warning message text.
        category (Type[Warning]): Warning category class. Defaults to RuntimeWarning.
        stacklevel (int): Stacklevel to report. Defaults to 2.
    """
    warnings.warn(message, category=category, stacklevel=stacklevel)


def warn_component(component: str, error: BaseException, stacklevel: int = 3) -> None:
    """
    Emits a component-identified render diagnostic.

    Args:
        component (str): Name of the failing page component.
        error (BaseException): Error raised by the component.
        stacklevel (int): Stacklevel to report. Defaults to 3.
    """
    warn(f"{component}: {type(error).__name__}: {error}", RenderWarning, stacklevel=stacklevel)
