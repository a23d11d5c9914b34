from app.models.scored_receipt import ScoredReceiptModel

__all__ = ["ScoredReceiptModel"]
