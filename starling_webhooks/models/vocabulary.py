from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Unrecognized:
    """A vocabulary token this library does not know yet, kept verbatim."""

    token: str


_CURRENCY_CODES = """
UNDEFINED AED AFN ALL AMD ANG AOA ARS AUD AWG AZN BAM BBD BDT BGN BHD
BIF BMD BND BOB BOV BRL BSD BTN BWP BYN BYR BZD CAD CDF CHE CHF CHW CLF
CLP CNY COP COU CRC CUC CUP CVE CZK DJF DKK DOP DZD EGP ERN ETB EUR FJD
FKP GBP GEL GHS GIP GMD GNF GTQ GYD HKD HNL HRK HTG HUF IDR ILS INR IQD
IRR ISK JMD JOD JPY KES KGS KHR KMF KPW KRW KWD KYD KZT LAK LBP LKR LRD
LSL LTL LYD MAD MDL MGA MKD MMK MNT MOP MRO MRU MUR MVR MWK MXN MXV MYR
MZN NAD NGN NIO NOK NPR NZD OMR PAB PEN PGK PHP PKR PLN PYG QAR RON RSD
RUB RUR RWF SAR SBD SCR SDG SEK SGD SHP SLL SOS SRD SSP STD STN SVC SYP
SZL THB TJS TMT TND TOP TRY TTD TWD TZS UAH UGX USD USN USS UYI UYU UZS
VEF VES VND VUV WST XAF XAG XAU XBA XBB XBC XBD XCD XDR XOF XPD XPF XPT
XSU XTS XUA XXX YER ZAR ZMW ZWL
"""

# ISO-3166 alpha-2 plus the reserved and withdrawn codes upstream still sends.
_COUNTRY_CODES = """
UNDEFINED AC AD AE AF AG AI AL AM AN AO AQ AR AS AT AU AW AX AZ BA BB
BD BE BF BG BH BI BJ BL BM BN BO BQ BR BS BT BU BV BW BY BZ CA CC CD CF
CG CH CI CK CL CM CN CO CP CR CS CU CV CW CX CY CZ DE DG DJ DK DM DO DZ
EA EC EE EG EH ER ES ET EU EZ FI FJ FK FM FO FR FX GA GB GD GE GF GG GH
GI GL GM GN GP GQ GR GS GT GU GW GY HK HM HN HR HT HU IC ID IE IL IM IN
IO IQ IR IS IT JE JM JO JP KE KG KH KI KM KN KP KR KW KY KZ LA LB LC LI
LK LR LS LT LU LV LY MA MC MD ME MF MG MH MK ML MM MN MO MP MQ MR MS MT
MU MV MW MX MY MZ NA NC NE NF NG NI NL NO NP NR NT NU NZ OM PA PE PF PG
PH PK PL PM PN PR PS PT PW PY QA RE RO RS RU RW SA SB SC SD SE SF SG SH
SI SJ SK SL SM SN SO SR SS ST SU SV SX SY SZ TA TC TD TF TG TH TJ TK TL
TM TN TO TP TR TT TV TW TZ UA UG UK UM US UY UZ VA VC VE VG VI VN VU WF
WS XK YE YT YU ZA ZM ZR ZW
"""

Currency = Enum(
    "Currency",
    [(code, code) for code in _CURRENCY_CODES.split()],
    module=__name__,
)
Currency.__doc__ = "ISO-4217 three letter currency code."

Country = Enum(
    "Country",
    [(code, code) for code in _COUNTRY_CODES.split()],
    module=__name__,
)
Country.__doc__ = "Country in which a transaction took place."


class Direction(Enum):
    IN = "IN"
    OUT = "OUT"


class Source(Enum):
    BRITISH_BUSINESS_BANK_FEES = "BRITISH_BUSINESS_BANK_FEES"
    CASH_DEPOSIT = "CASH_DEPOSIT"
    CASH_DEPOSIT_CHARGE = "CASH_DEPOSIT_CHARGE"
    CASH_WITHDRAWAL = "CASH_WITHDRAWAL"
    CASH_WITHDRAWAL_CHARGE = "CASH_WITHDRAWAL_CHARGE"
    CHAPS = "CHAPS"
    CHEQUE = "CHEQUE"
    CICS_CHEQUE = "CICS_CHEQUE"
    CURRENCY_CLOUD = "CURRENCY_CLOUD"
    DIRECT_CREDIT = "DIRECT_CREDIT"
    DIRECT_DEBIT = "DIRECT_DEBIT"
    DIRECT_DEBIT_DISPUTE = "DIRECT_DEBIT_DISPUTE"
    INTERNAL_TRANSFER = "INTERNAL_TRANSFER"
    MASTER_CARD = "MASTER_CARD"
    MASTERCARD_MONEYSEND = "MASTERCARD_MONEYSEND"
    MASTERCARD_CHARGEBACK = "MASTERCARD_CHARGEBACK"
    FASTER_PAYMENTS_IN = "FASTER_PAYMENTS_IN"
    FASTER_PAYMENTS_OUT = "FASTER_PAYMENTS_OUT"
    FASTER_PAYMENTS_REVERSAL = "FASTER_PAYMENTS_REVERSAL"
    STRIPE_FUNDING = "STRIPE_FUNDING"
    INTEREST_PAYMENT = "INTEREST_PAYMENT"
    NOSTRO_DEPOSIT = "NOSTRO_DEPOSIT"
    OVERDRAFT = "OVERDRAFT"
    OVERDRAFT_INTEREST_WAIVED = "OVERDRAFT_INTEREST_WAIVED"
    FASTER_PAYMENTS_REFUND = "FASTER_PAYMENTS_REFUND"
    STARLING_PAY_STRIPE = "STARLING_PAY_STRIPE"
    ON_US_PAY_ME = "ON_US_PAY_ME"
    LOAN_PRINCIPAL_PAYMENT = "LOAN_PRINCIPAL_PAYMENT"
    LOAN_REPAYMENT = "LOAN_REPAYMENT"
    LOAN_OVERPAYMENT = "LOAN_OVERPAYMENT"
    LOAN_LATE_PAYMENT = "LOAN_LATE_PAYMENT"
    LOAN_FEE_PAYMENT = "LOAN_FEE_PAYMENT"
    SEPA_CREDIT_TRANSFER = "SEPA_CREDIT_TRANSFER"
    SEPA_DIRECT_DEBIT = "SEPA_DIRECT_DEBIT"
    TARGET2_CUSTOMER_PAYMENT = "TARGET2_CUSTOMER_PAYMENT"
    FX_TRANSFER = "FX_TRANSFER"
    ISS_PAYMENT = "ISS_PAYMENT"
    STARLING_PAYMENT = "STARLING_PAYMENT"
    SUBSCRIPTION_CHARGE = "SUBSCRIPTION_CHARGE"
    OVERDRAFT_FEE = "OVERDRAFT_FEE"


class SourceSubType(Enum):
    CONTACTLESS = "CONTACTLESS"
    MAGNETIC_STRIP = "MAGNETIC_STRIP"
    MANUAL_KEY_ENTRY = "MANUAL_KEY_ENTRY"
    CHIP_AND_PIN = "CHIP_AND_PIN"
    ONLINE = "ONLINE"
    ATM = "ATM"
    CREDIT_AUTH = "CREDIT_AUTH"
    APPLE_PAY = "APPLE_PAY"
    ANDROID_PAY = "ANDROID_PAY"
    FITBIT_PAY = "FITBIT_PAY"
    GARMIN_PAY = "GARMIN_PAY"
    SAMSUNG_PAY = "SAMSUNG_PAY"
    OTHER_WALLET = "OTHER_WALLET"
    NOT_APPLICABLE = "NOT_APPLICABLE"
    UNKNOWN = "UNKNOWN"
    DEPOSIT = "DEPOSIT"
    OVERDRAFT = "OVERDRAFT"
    SETTLE_UP = "SETTLE_UP"
    NEARBY = "NEARBY"
    TRANSFER_SAME_CURRENCY = "TRANSFER_SAME_CURRENCY"
    SCT_PAYMENT = "SCT_PAYMENT"
    SCT_REJECTION = "SCT_REJECTION"
    SCT_RETURN = "SCT_RETURN"
    SCT_RECALL = "SCT_RECALL"
    SDD_PENDING = "SDD_PENDING"
    SDD_PAYMENT = "SDD_PAYMENT"
    SDD_RETURN = "SDD_RETURN"
    CC_EXCHANGE = "CC_EXCHANGE"
    CC_DOMESTIC = "CC_DOMESTIC"
    FX_TRANSFER_SAME_ACCOUNT_HOLDER = "FX_TRANSFER_SAME_ACCOUNT_HOLDER"
    FX_TRANSFER_BETWEEN_ACCOUNT_HOLDERS = "FX_TRANSFER_BETWEEN_ACCOUNT_HOLDERS"


class Status(Enum):
    UPCOMING = "UPCOMING"
    PENDING = "PENDING"
    RETRYING = "RETRYING"
    REVERSED = "REVERSED"
    SETTLED = "SETTLED"
    DECLINED = "DECLINED"
    REFUNDED = "REFUNDED"
    ACCOUNT_CHECK = "ACCOUNT_CHECK"


class CounterPartyType(Enum):
    CATEGORY = "CATEGORY"
    CHEQUE = "CHEQUE"
    CUSTOMER = "CUSTOMER"
    PAYEE = "PAYEE"
    MERCHANT = "MERCHANT"
    SENDER = "SENDER"
    STARLING = "STARLING"
    LOAN = "LOAN"


class SpendingCategory(Enum):
    BILLS_AND_SERVICES = "BILLS_AND_SERVICES"
    CHARITY = "CHARITY"
    EATING_OUT = "EATING_OUT"
    ENTERTAINMENT = "ENTERTAINMENT"
    EXPENSES = "EXPENSES"
    FAMILY = "FAMILY"
    GAMBLING = "GAMBLING"
    GENERAL = "GENERAL"
    GIFTS = "GIFTS"
    GROCERIES = "GROCERIES"
    HOLIDAYS = "HOLIDAYS"
    HOME = "HOME"
    INCOME = "INCOME"
    LIFESTYLE = "LIFESTYLE"
    PAYMENTS = "PAYMENTS"
    PETS = "PETS"
    SAVING = "SAVING"
    SHOPPING = "SHOPPING"
    TRANSPORT = "TRANSPORT"
    NONE = "NONE"
    REVENUE = "REVENUE"
    OTHER_INCOME = "OTHER_INCOME"
    CLIENT_REFUNDS = "CLIENT_REFUNDS"
    INVENTORY = "INVENTORY"
    STAFF = "STAFF"
    TRAVEL = "TRAVEL"
    WORKPLACE = "WORKPLACE"
    REPAIRS_AND_MAINTENANCE = "REPAIRS_AND_MAINTENANCE"
    ADMIN = "ADMIN"
    MARKETING = "MARKETING"
    BUSINESS_ENTERTAINMENT = "BUSINESS_ENTERTAINMENT"
    INTEREST_PAYMENTS = "INTEREST_PAYMENTS"
    BANK_CHARGES = "BANK_CHARGES"
    OTHER = "OTHER"
    FOOD_AND_DRINK = "FOOD_AND_DRINK"
    EQUIPMENT = "EQUIPMENT"
    PROFESSIONAL_SERVICES = "PROFESSIONAL_SERVICES"
    PHONE_AND_INTERNET = "PHONE_AND_INTERNET"
    VEHICLES = "VEHICLES"
    DIRECTORS_WAGES = "DIRECTORS_WAGES"
    VAT = "VAT"
    CORPORATION_TAX = "CORPORATION_TAX"
    SELF_ASSESSMENT_TAX = "SELF_ASSESSMENT_TAX"
    INVESTMENT_CAPITAL = "INVESTMENT_CAPITAL"
    TRANSFERS = "TRANSFERS"
    LOAN_PRINCIPAL = "LOAN_PRINCIPAL"
    PERSONAL = "PERSONAL"
    DIVIDENDS = "DIVIDENDS"


class FeedItemFailureReason(Enum):
    CARD_WALLET_LIMIT = "CARD_WALLET_LIMIT"
    CARD_APPLE_PAY_LIMIT = "CARD_APPLE_PAY_LIMIT"
    CARD_POS_DISABLED = "CARD_POS_DISABLED"
    CARD_ATM_DISABLED = "CARD_ATM_DISABLED"
    CARD_MOBILE_WALLET_DISABLED = "CARD_MOBILE_WALLET_DISABLED"
    CARD_ONLINE_DISABLED = "CARD_ONLINE_DISABLED"
    CARD_GAMBLING_DISABLED = "CARD_GAMBLING_DISABLED"
    CARD_DISABLED = "CARD_DISABLED"
    CARD_CANCELLED = "CARD_CANCELLED"
    CARD_NOT_ACTIVATED = "CARD_NOT_ACTIVATED"
    CARD_MAGNETIC_STRIP_DISABLED = "CARD_MAGNETIC_STRIP_DISABLED"
    CARD_MANUAL_KEY_ENTRY_DISABLED = "CARD_MANUAL_KEY_ENTRY_DISABLED"
    CARD_PAY_AT_PUMP_DECLINED = "CARD_PAY_AT_PUMP_DECLINED"
    CARD_INSUFFICIENT_FUNDS = "CARD_INSUFFICIENT_FUNDS"
    CHILD_CARD_MERCHANT_DISABLED = "CHILD_CARD_MERCHANT_DISABLED"
    DESTINATION_ACCOUNT_INVALID = "DESTINATION_ACCOUNT_INVALID"
    REFERENCE_INFORMATION_INCORRECT = "REFERENCE_INFORMATION_INCORRECT"
    DESTINATION_ACCOUNT_CURRENCY_INCORRECT = "DESTINATION_ACCOUNT_CURRENCY_INCORRECT"
    DESTINATION_ACCOUNT_NAME_MISMATCH = "DESTINATION_ACCOUNT_NAME_MISMATCH"
    DESTINATION_ACCOUNT_UNAVAILABLE = "DESTINATION_ACCOUNT_UNAVAILABLE"
    INCORRECT_PIN = "INCORRECT_PIN"
    INCORRECT_CVV2 = "INCORRECT_CVV2"
    INSUFFICIENT_FUNDS = "INSUFFICIENT_FUNDS"
    MANDATE_CANCELLED = "MANDATE_CANCELLED"
    MANDATE_NOT_FOUND = "MANDATE_NOT_FOUND"
    CHEQUE_BEING_REPRESENTED = "CHEQUE_BEING_REPRESENTED"
    CHEQUE_ISSUER_ACCOUNT_CLOSED = "CHEQUE_ISSUER_ACCOUNT_CLOSED"
    CHEQUE_NOT_SIGNED_IN_ACCORDANCE_WITH_MANDATE = "CHEQUE_NOT_SIGNED_IN_ACCORDANCE_WITH_MANDATE"
    CHEQUE_STOPPED = "CHEQUE_STOPPED"
    CHEQUE_DECLINED_REFER_TO_ISSUER = "CHEQUE_DECLINED_REFER_TO_ISSUER"
    LAST_BILL_ITEM_CANCELLED = "LAST_BILL_ITEM_CANCELLED"
    SCA_REQUIRED = "SCA_REQUIRED"
    PIN_TRIES_EXCEEDED = "PIN_TRIES_EXCEEDED"
    CVC_TRIES_EXCEEDED = "CVC_TRIES_EXCEEDED"
    SUSPICIOUS_CARD_TRANSACTION = "SUSPICIOUS_CARD_TRANSACTION"


class Frequency(Enum):
    DAILY = "DAILY"
    WEEKLY = "WEEKLY"
    MONTHLY = "MONTHLY"
    YEARLY = "YEARLY"


VOCABULARIES = (
    Currency,
    Country,
    Direction,
    Source,
    SourceSubType,
    Status,
    CounterPartyType,
    SpendingCategory,
    FeedItemFailureReason,
    Frequency,
)
