from aiproxy.config.config import Config

__all__ = ["Config"]
