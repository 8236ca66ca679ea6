"""
Descriptors that give every in-place vector operation a non-mutating twin.

``v.add(w)`` changes ``v`` and returns it so calls can be chained.
``Vector2.add(v, w)`` leaves ``v`` alone: the operation runs on a fresh copy of
the owner type built from ``v``'s components, and the copy is returned. The
first argument may therefore be any iterable of the right length, including
the immutable vector types.
"""
import functools
import types


class mutator:
    """Wraps an in-place operation; class-level access returns a copying function."""

    def __init__(self, func):
        self.func = func
        functools.update_wrapper(self, func)

    def __get__(self, instance, owner=None):
        if instance is not None:
            return types.MethodType(self.func, instance)
        func = self.func

        @functools.wraps(func)
        def pure(vector, *args, **kwargs):
            return func(owner(*vector), *args, **kwargs)

        return pure


class sampler(mutator):
    """
    Like mutator, but the class-level form takes no vector: it starts from the
    unit vector along the first axis, so ``Vector3.random()`` yields a unit vector.
    """

    def __get__(self, instance, owner=None):
        if instance is not None:
            return types.MethodType(self.func, instance)
        func = self.func

        @functools.wraps(func)
        def pure(*args, **kwargs):
            return func(owner(1.0), *args, **kwargs)

        return pure
