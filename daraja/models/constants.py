from enum import Enum


class TransactionType(str, Enum):
    CUSTOMER_PAYBILL_ONLINE = 'CustomerPayBillOnline'
    CUSTOMER_BUY_GOODS_ONLINE = 'CustomerBuyGoodsOnline'


class GrantType(str, Enum):
    CLIENT_CREDENTIALS = 'client_credentials'


DEFAULT_TRANSACTION_TYPE = TransactionType.CUSTOMER_PAYBILL_ONLINE
DEFAULT_TRANSACTION_DESC = 'Payment'
