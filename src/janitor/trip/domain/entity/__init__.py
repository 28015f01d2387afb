from .garbage_bag import GarbageBag

__all__ = ["GarbageBag"]
