from sqlalchemy.orm import Session
from app.db.models.bid import Bid, BidStatus

def get_bid_for_project(db: Session, project_id: int, bid_id: int) -> Bid | None:
    return db.query(Bid).filter(Bid.id == bid_id, Bid.project_id == project_id).one_or_none()

def find_bid_by_bidder(db: Session, project_id: int, bidder_id: int) -> Bid | None:
    return (
        db.query(Bid)
        .filter(Bid.project_id == project_id, Bid.bidder_id == bidder_id)
        .order_by(Bid.id)
        .first()
    )

def settle_bids(db: Session, project_id: int, accepted: Bid) -> None:
    """Mark the accepted bid and reject the project's other pending bids."""
    accepted.status = BidStatus.accepted.value
    (
        db.query(Bid)
        .filter(Bid.project_id == project_id, Bid.id != accepted.id, Bid.status == BidStatus.pending.value)
        .update({Bid.status: BidStatus.rejected.value}, synchronize_session="fetch")
    )
