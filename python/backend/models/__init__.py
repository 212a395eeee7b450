from backend.models.board import Direction, Move, Position

__all__ = ["Direction", "Move", "Position"]
