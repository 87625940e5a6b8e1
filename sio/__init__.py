"""Runtime values, native-function environments, literal mapping and link routing for sio."""

__version__ = "0.1.0"
__all__ = ["errors", "value", "environ", "router"]