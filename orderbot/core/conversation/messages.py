"""
Texts and menus shown to the customer.
"""

from typing import Tuple

# Rows of reply keyboard buttons
Menu = Tuple[Tuple[str, ...], ...]

PRICE_LIST_BUTTON = "📋 Прайс"
MAKE_ORDER_BUTTON = "🛒 Сделать заказ"

MAIN_MENU: Menu = ((PRICE_LIST_BUTTON, MAKE_ORDER_BUTTON),)


WELCOME_MESSAGE = """🍕 <b>Добро пожаловать в сервис заказов!</b>

Выберите действие:"""


PRICE_LIST_MESSAGE = """📋 <b>Наш прайс-лист:</b>

🍕 <b>Пиццы:</b>
• Маргарита — 550₽
• Пепперони — 650₽
• Гавайская — 600₽

🍔 <b>Бургеры:</b>
• Классический — 350₽
• Чизбургер — 400₽
• Двойной — 500₽

🥗 <b>Салаты:</b>
• Цезарь — 300₽
• Греческий — 280₽

🥤 <b>Напитки:</b>
• Coca-Cola — 150₽
• Fanta — 150₽
• Вода — 100₽

💵 Минимальный заказ: 500₽
🚚 Доставка: бесплатно от 1000₽"""


PRODUCT_PROMPT = """Что вы хотите заказать? Опишите заказ одним сообщением:

• Пицца Маргарита — 550₽
• Пицца Пепперони — 650₽
• Бургер Классический — 350₽
• Салат Цезарь — 300₽
• Напиток Coca-Cola — 150₽

<i>Например: «2 колы и пицца Маргарита»</i>"""

QUANTITY_PROMPT = "Введите количество:"

ADDRESS_PROMPT = "📍 Введите адрес доставки:"

PHONE_PROMPT = "📞 Введите ваш номер телефона для связи:"
