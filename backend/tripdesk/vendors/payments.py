"""
Payment gateway APIs (stub)
PayPal and Stripe take typed records, Square takes a JSON query string.
"""
import json
import logging

from pydantic import BaseModel

logger = logging.getLogger(__name__)

class PayPalCreditCard(BaseModel):
    name: str = ""
    address: str = ""
    card_id: str = ""
    expire_date: str = ""
    ccv: int = 0

class StripeUserInfo(BaseModel):
    name: str = ""
    address: str = ""

class StripeCardInfo(BaseModel):
    card_id: str = ""
    expire_date: str = ""
    ccv: int = 0

class PayPalOnlinePaymentAPI:
    def __init__(self):
        self.card = PayPalCreditCard()

    def set_card_info(self, card: PayPalCreditCard) -> None:
        self.card = self.card.model_copy(update={
            "card_id": card.card_id, "expire_date": card.expire_date, "ccv": card.ccv,
        })

    def set_user_info(self, card: PayPalCreditCard) -> None:
        self.card = self.card.model_copy(update={"name": card.name, "address": card.address})

    def make_payment(self, money: float) -> bool:
        logger.info(f"[PAYPAL] Charging {money:.2f} to {self.card.name}")
        return True

def stripe_withdraw_money(user: StripeUserInfo, card: StripeCardInfo, money: float) -> bool:
    logger.info(f"[STRIPE] Withdrawing {money:.2f} from {user.name}")
    return True

def square_withdraw_money(json_query: str) -> bool:
    query = json.loads(json_query)
    logger.info(f"[SQUARE] Withdrawing {query.get('payment_money')} for {query.get('user_info')}")
    return True
