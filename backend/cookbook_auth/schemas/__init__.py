from .auth import LoginIn, MessageOut, SignupIn

__all__ = ["LoginIn", "MessageOut", "SignupIn"]
