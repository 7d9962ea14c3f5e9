"""Domain constants for the expense dashboard."""

from decimal import Decimal

# Categories seeded for every new user: (name, color, icon).
DEFAULT_CATEGORIES = (
    ("Alimentação", "#ef4444", "🍔"),
    ("Transporte", "#3b82f6", "🚗"),
    ("Compras", "#8b5cf6", "🛍️"),
    ("Entretenimento", "#f59e0b", "🎬"),
    ("Contas e Serviços", "#6b7280", "💡"),
    ("Saúde", "#10b981", "🏥"),
    ("Educação", "#06b6d4", "📚"),
    ("Viagens", "#ec4899", "✈️"),
)

DEFAULT_CURRENCY = "USD"

# Largest amount the store accepts (NUMERIC(10, 2)).
MAX_AMOUNT = Decimal("99999999.99")


__all__ = ["DEFAULT_CATEGORIES", "DEFAULT_CURRENCY", "MAX_AMOUNT"]
