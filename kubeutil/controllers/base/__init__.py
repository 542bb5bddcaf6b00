"""Base controller classes."""

from kubeutil.controllers.base.base_controller import BaseController

__all__ = ["BaseController"]
