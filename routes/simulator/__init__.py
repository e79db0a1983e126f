from .routes import simulator_bp

__all__ = ["simulator_bp"]
