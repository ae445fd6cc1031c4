from .rand_int import rand_int

__all__ = ['rand_int']
