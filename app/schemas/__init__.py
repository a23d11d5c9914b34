from app.schemas.receipt import Item, PointsResponse, ProcessResponse, Receipt

__all__ = ["Item", "PointsResponse", "ProcessResponse", "Receipt"]
