import functools
import logging

__all__ = [
    'InitializationPipeline',
    'HookChainException',
    'around_initialize',
    'before_initialize',
    'after_initialize',
    'before_hook',
    'after_hook',
    'method_hook']

L = logging.getLogger(__name__)

HOOK_MARKER = '_resgraph_initialize_hook'


class HookChainException(Exception):

    """ Raised when a hook misuses the chain it was given """
    pass


class InitializationPipeline(object):

    """ Runs an ordered list of "around" hooks wrapped about a core step.

    Each hook is a callable taking the object being initialized and a
    ``proceed`` callable::

        def hook(resource, proceed):
            # before the core step
            proceed()
            # after the core step

    The first hook in the list is outermost: it wraps every hook that comes
    after it, and the last hook wraps the core step directly. A hook that never
    calls ``proceed`` skips the remainder of the chain, core step included.
    Whatever a hook raises propagates unchanged out of :meth:`run`.
    """

    def __init__(self, hooks, core):
        self.hooks = tuple(hooks)
        self.core = core

    def run(self, target):
        L.debug("Running %d initialize hooks for %s",
                len(self.hooks), type(target).__name__)
        self._step(target, 0)()

    def _step(self, target, index):
        if index == len(self.hooks):
            return functools.partial(self.core, target)

        hook = self.hooks[index]
        inner = self._step(target, index + 1)
        called = []

        def proceed():
            if called:
                raise HookChainException(
                    "{} called proceed more than once".format(
                        _hook_name(hook)))
            called.append(True)
            inner()

        return functools.partial(hook, target, proceed)

    def __len__(self):
        return len(self.hooks)


def before_hook(func):
    """ Turn a function of the object being initialized into an around hook
    that runs it before the rest of the chain
    """
    def hook(target, proceed):
        func(target)
        proceed()
    hook.wrapped = func
    return hook


def after_hook(func):
    """ Turn a function of the object being initialized into an around hook
    that runs it after the rest of the chain
    """
    def hook(target, proceed):
        proceed()
        func(target)
    hook.wrapped = func
    return hook


def around_initialize(func):
    """ Mark a method in a resource class body as an around-initialize hook.

    The method receives ``proceed`` and must call it exactly once for
    initialization to continue::

        class Person(Resource):
            @around_initialize
            def stamp(self, proceed):
                proceed()
                self.created = datetime.now()

    The method is looked up by name when the hook runs, so a subclass that
    overrides it changes what the hook does without registering a second one.
    """
    setattr(func, HOOK_MARKER, 'around')
    return func


def before_initialize(func):
    """ Mark a method in a resource class body to run before the core
    initialization step
    """
    setattr(func, HOOK_MARKER, 'before')
    return func


def after_initialize(func):
    """ Mark a method in a resource class body to run after the core
    initialization step
    """
    setattr(func, HOOK_MARKER, 'after')
    return func


def method_hook(name, kind):
    """ An around hook that calls the method `name` on the object being
    initialized
    """
    if kind == 'around':
        def hook(target, proceed):
            getattr(target, name)(proceed)
    elif kind == 'before':
        def hook(target, proceed):
            getattr(target, name)()
            proceed()
    elif kind == 'after':
        def hook(target, proceed):
            proceed()
            getattr(target, name)()
    else:
        raise ValueError("Unknown hook kind " + repr(kind))
    hook.method_name = name
    return hook


def collect_marked_hooks(dct):
    """ Hooks for the methods marked in a class body, in definition order """
    res = []
    for name, v in dct.items():
        kind = getattr(v, HOOK_MARKER, None)
        if kind is not None:
            res.append(method_hook(name, kind))
    return res


def _hook_name(hook):
    f = getattr(hook, 'wrapped', hook)
    return getattr(hook, 'method_name', None) or \
        getattr(f, '__qualname__', repr(f))
