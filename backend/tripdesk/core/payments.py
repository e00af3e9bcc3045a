"""
Payment method adapters
Same adapter pattern as reservations: each method translates TransactionInfo
into its gateway's shape. Square expects a JSON query string.
"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Optional

from tripdesk.models import TransactionInfo
from tripdesk.vendors import payments as gateways
from tripdesk.vendors.payments import PayPalCreditCard, StripeCardInfo, StripeUserInfo

logger = logging.getLogger(__name__)

class PaymentMethod(ABC):

    @abstractmethod
    def set_user_info(self, info: TransactionInfo) -> None:
        ...

    @abstractmethod
    def set_card_info(self, info: TransactionInfo) -> None:
        ...

    @abstractmethod
    def make_payment(self, money: float) -> bool:
        ...

class PaypalPayment(PaymentMethod):

    def __init__(self):
        self.paypal = gateways.PayPalOnlinePaymentAPI()
        self.info = PayPalCreditCard()

    def set_user_info(self, info: TransactionInfo) -> None:
        self.info.name = info.name
        self.info.address = info.address

    def set_card_info(self, info: TransactionInfo) -> None:
        self.info.card_id = info.card_id
        self.info.expire_date = info.expire_date
        self.info.ccv = info.ccv

    def make_payment(self, money: float) -> bool:
        self.paypal.set_card_info(self.info)
        self.paypal.set_user_info(self.info)
        return self.paypal.make_payment(money)

class StripePayment(PaymentMethod):

    def __init__(self):
        self.user = StripeUserInfo()
        self.card = StripeCardInfo()

    def set_user_info(self, info: TransactionInfo) -> None:
        self.user.name = info.name
        self.user.address = info.address

    def set_card_info(self, info: TransactionInfo) -> None:
        self.card.card_id = info.card_id
        self.card.expire_date = info.expire_date
        self.card.ccv = info.ccv

    def make_payment(self, money: float) -> bool:
        return gateways.stripe_withdraw_money(self.user, self.card, money)

class SquarePayment(PaymentMethod):

    def __init__(self):
        self.query: dict = {}

    def set_user_info(self, info: TransactionInfo) -> None:
        self.query["user_info"] = [info.name, info.address]

    def set_card_info(self, info: TransactionInfo) -> None:
        self.query["card_info"] = {
            "id": info.card_id,
            "ccv": info.ccv,
            "expire_date": info.expire_date,
        }

    def make_payment(self, money: float) -> bool:
        self.query["payment_money"] = money
        return gateways.square_withdraw_money(json.dumps(self.query))

PAYMENT_METHODS = {
    "paypal": PaypalPayment,
    "stripe": StripePayment,
    "square": SquarePayment,
}

class PaymentFactory:

    @staticmethod
    def get_payment_method(method: str) -> Optional[PaymentMethod]:
        method_cls = PAYMENT_METHODS.get(method)
        if method_cls is None:
            logger.warning(f"Unknown payment method '{method}'")
            return None
        return method_cls()

class MakePayment:

    def __init__(self):
        self.payment: Optional[PaymentMethod] = None

    def pay(self, info: TransactionInfo) -> bool:
        self.payment = PaymentFactory.get_payment_method(info.method)
        if self.payment is None:
            return False
        self.payment.set_card_info(info)
        self.payment.set_user_info(info)
        ok = self.payment.make_payment(info.money)
        if ok:
            logger.info(f"Payment of {info.money:.2f} via {info.method} accepted")
        else:
            logger.warning(f"Payment of {info.money:.2f} via {info.method} declined")
        return ok
