from fng.util.di.scope import Scope

__all__ = ["Scope"]
