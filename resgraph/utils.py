__all__ = ['FCN']


def FCN(cls):
    """ The fully-qualified name of a class """
    return str(cls.__module__) + '.' + str(cls.__name__)
