"""Product persistence: find, list, insert, update, delete."""

from sqlalchemy.orm import Session

from app.models.product import Product


class ProductRepository:
    """Thin wrapper over a Session for the products table.

    Every write commits immediately; on failure the session is rolled back
    and the original exception propagates to the caller.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def find_by_id(self, product_id: int) -> Product | None:
        return self.session.query(Product).filter(Product.id == product_id).first()

    def list_all(self) -> list[Product]:
        return self.session.query(Product).order_by(Product.id).all()

    def insert(self, product: Product) -> Product:
        self.session.add(product)
        self._commit()
        self.session.refresh(product)
        return product

    def update(self, product: Product) -> Product:
        self._commit()
        self.session.refresh(product)
        return product

    def delete(self, product: Product) -> None:
        self.session.delete(product)
        self._commit()

    def _commit(self) -> None:
        try:
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise
