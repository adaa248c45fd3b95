import logging

from ..errors import NotFound, ValidationError
from ..models import Category
from ..models.category import CATEGORY_TYPES, DEFAULT_COLOR
from ..serializers import category_to_dict
from ..validators import parse_choice, require_fields

logger = logging.getLogger(__name__)


class CategoryDirectory:
    def __init__(self, session):
        self.session = session

    def get(self, category_id):
        category = self.session.get(Category, category_id)
        if category is None:
            raise NotFound("Category not found")
        return category

    def ensure_exists(self, category_id):
        self.get(category_id)

    def list_all(self):
        rows = self.session.query(Category).order_by(Category.type, Category.name).all()
        return [category_to_dict(c) for c in rows]

    def create(self, data):
        require_fields(data, "name", "type")
        category = Category(
            name=str(data["name"]).strip(),
            type=parse_choice(data["type"], CATEGORY_TYPES, "type"),
            color=data.get("color") or DEFAULT_COLOR,
        )
        self.session.add(category)
        self.session.commit()
        logger.info("Created category %s (%s)", category.name, category.type)
        return category_to_dict(category)

    def update(self, category_id, data):
        category = self.get(category_id)
        changes = {}
        if data.get("name") is not None:
            name = str(data["name"]).strip()
            if not name:
                raise ValidationError("name must not be blank")
            changes["name"] = name
        if data.get("type") is not None:
            changes["type"] = parse_choice(data["type"], CATEGORY_TYPES, "type")
        if data.get("color") is not None:
            if not str(data["color"]).strip():
                raise ValidationError("color must not be blank")
            changes["color"] = data["color"]
        for field, value in changes.items():
            setattr(category, field, value)
        self.session.commit()
        return category_to_dict(category)

    def delete(self, category_id):
        # Transactions, bills and budgets keep their now dangling category_id.
        category = self.get(category_id)
        self.session.delete(category)
        self.session.commit()
        logger.info("Deleted category %s", category_id)

    def seed_defaults(self, defaults):
        existing = {(c.name.lower(), c.type) for c in self.session.query(Category).all()}
        created = 0
        for name, ctype, color in defaults:
            if (name.lower(), ctype) not in existing:
                self.session.add(Category(name=name, type=ctype, color=color))
                created += 1
        if created:
            self.session.commit()
        return created
