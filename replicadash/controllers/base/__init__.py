"""Base controller classes."""

from replicadash.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
