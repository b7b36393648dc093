"""State Bank of India narration style.

SBI statements print transfers over two or three lines
(``BY TRANSFER-`` / ``UPI/CR/...``) and carry ``TRANSFER FROM|TO`` references.
Counterparty names are drawn without repetition inside one statement so the
ledger never shows money moving back and forth between the same two people.
"""
from __future__ import annotations

from datetime import date

from ..context import GenerationContext
from .base import AmountTier, BankStyleProfile, Category, Narration, mostly_round
from .common import (
    ATM_WITHDRAWAL,
    BANK_CHARGES,
    CASHBACK,
    CASH_DEPOSIT,
    EMI_DEBIT,
    NEFT_CREDIT,
    POS_DEBIT,
    UPI_CREDIT,
)
from .registry import register

INDIAN_NAMES = (
    "Ghanshya", "Vipin P", "Soniya P", "Nitin C", "Akhlesh", "Ramesh K",
    "Manoj S", "Ravi Ku", "Kiran J", "Sunder D", "Mohd Sho", "Amir Uddin",
    "Vinod T", "Rajesh K", "Priya S", "Dinesh M", "Anjali R", "Vikram S",
    "Deepak G", "Anita R", "Rahul M", "Meera K", "Vishal T", "Kavita M",
    "Arun Pa", "Seema D", "Harish B", "Rekha G", "Mukesh Y", "Sunita V",
    "Prakash", "Nisha T", "Ashok Ku", "Preeti S", "Sandeep", "Geeta Ra",
    "Rajeev M", "Divya N", "Manish G", "Poornima", "Anil Ku", "Swati Pa",
    "Yogesh K", "Neelam S", "Sanjay R", "Uma Devi", "Rohit Si", "Lata Ma",
    "Sunil Ku", "Archana", "Naveen P", "Rani Kum", "Praveen", "Shanti D",
    "Mahesh T", "Lakshmi", "Ramesh P", "Jyoti Si", "Girish K", "Vanita R",
    "Santosh", "Bharti M", "Naresh K", "Pushpa D", "Raju Kum", "Sarita P",
    "Ajay Sin", "Mamta Ra", "Vijay Ku", "Usha Ran", "Sudhir P", "Anuja Pa",
    "Mohan La", "Veena Ku", "Kishore", "Savita D", "Hemant K", "Shobha M",
    "Jagdish", "Pramila", "Subhash", "Nirmala", "Brijesh", "Kamala D",
    "Avinash", "Sudha Pa", "Ramanuj", "Manjula", "Dilip Ku", "Padmini",
    "Umesh Pa", "Sharada", "Prakrti", "Madhuri", "Nitesh M", "Sharmila",
)

BANK_CODES = (
    "SBIN", "HDFC", "ICIC", "YESB", "KKBK", "AIRP", "UTIB", "IDFB",
    "BKID", "IDIB", "PUNB", "CNRB", "CBIN", "INDB", "UBIN", "BARB",
)

UPI_HANDLES = ("paytm", "gpay", "phonepe", "amazonpay", "bhim")

LOCATION_SUFFIXES = (
    "Main Branch", "ATM", "Sector", "Road", "Market", "Plaza",
    "Mall", "Complex", "Junction", "Station", "Circle", "Chowk",
)

AREA_PREFIXES = ("Central", "East", "West", "North", "South", "New", "Old")

MERCHANTS = (
    "CANTERBURY TRADERS LLP", "YOUR SERVICE STATION", "RELIANCE DIGITAL",
    "DMart SUPER MARKET", "BIG BAZAAR", "CAFE COFFEE DAY", "McDONALDS",
    "PETROL PUMP HP", "DOMINOS PIZZA", "SHOPPERS STOP", "PANTALOONS",
)

NEFT_ENTITIES = (
    "COMMISSIONER MUN", "TAX DEPARTMENT", "UTILITY SERVICES",
    "INSURANCE CORP", "LOAN SERVICES", "FINANCE LTD",
)

MANDATE_COMPANIES = (
    "Bajaj Finance Ltd", "HDFC Life Insurance", "ICICI Prudential",
    "SBI Cards", "Kotak Mahindra", "Axis Finance",
)

SERVICE_CHARGES = (
    "FI SERVICE CHARGE DR-",
    "SMS ALERT CHARGES-",
    "AMC CHARGES-",
    "DEBIT CARD AMC-",
)

CASHBACK_PROVIDERS = (
    ("GOOGLE I", "goog-Payme-", "UTIB"),
    ("PAYTM", "Payme-.s1cd", "YESB"),
    ("PHONEPE", "phonepe.1", "ICIC"),
)

SALARY_BANK_CODES = ("KKBK", "HDFC", "ICIC", "SBIN", "PUNB")

UPI_DEBIT = mostly_round(
    AmountTier(0.5, 300, 1500, choices=(300, 500, 1000, 1500)),
    AmountTier(0.3, 1500, 4000, round_low=2000),
    AmountTier(0.2, 4000, 8000),
)


def _transfer_reference(rng, flow: str) -> str:
    prefix = "469" if rng.next() < 0.5 else "489"
    return f"TRANSFER\n{flow}\n {prefix}{rng.digits(10)}"


def _short_name(name: str) -> str:
    return name[:10].ljust(8)


def location_in_city(ctx: GenerationContext) -> str:
    """A branch or landmark inside the account holder's city."""

    rng = ctx.rng
    use_prefix = rng.next() < 0.4
    suffix = rng.pick(LOCATION_SUFFIXES)
    if use_prefix:
        prefix = rng.pick(AREA_PREFIXES)
        return f"{prefix} {ctx.user_city} {suffix}"
    if rng.next() < 0.3:
        return ctx.branch_location
    return f"{ctx.user_city} {suffix}"


def _upi(is_credit: bool):
    def render(ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        ref_number = rng.digits(12)
        name = ctx.unique_name(INDIAN_NAMES)
        bank_code = rng.pick(BANK_CODES)
        mobile = f"{rng.random_int(7, 9)}{rng.digits(9)}"
        handle = rng.pick(UPI_HANDLES)

        direction = "CR" if is_credit else "DR"
        action = "BY TRANSFER" if is_credit else "TO TRANSFER"
        flow = "FROM" if is_credit else "TO"

        upi_ids = (
            mobile,
            f"{'Payme-' if handle == 'paytm' else handle}rechar",
            f"{handle}.{rng.random_int(1000, 9999)}",
            f"{name.lower().replace(' ', '')}@",
            f"q{rng.digits(9)}",
        )
        upi_id = rng.pick(upi_ids)

        layout = rng.next()
        body = f"UPI/{direction}/{ref_number}/{_short_name(name)}/{bank_code}/"
        if layout < 0.3:
            description = f"{action}-{body}{upi_id}/UPI"
        elif layout < 0.7:
            description = f"{action}-\n{body}{upi_id}/UPI"
        else:
            description = f"{action}-\n{body}\n{upi_id}/UPI"
        return Narration(description, _transfer_reference(rng, flow))

    return render


def _neft(is_credit: bool):
    def render(ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        bank_code = rng.pick(BANK_CODES)
        ref_number = rng.digits(10)
        year = f"{when.year % 100:02d}"
        entity = rng.pick(NEFT_ENTITIES)
        action = "BY TRANSFER" if is_credit else "TO TRANSFER"
        flow = "FROM" if is_credit else "TO"
        description = (
            f"{action}-\nNEFT*{bank_code}0000{rng.random_int(100, 999)}*{bank_code}{year}"
            f"\n{ref_number}*{entity}"
        )
        return Narration(description, f"TRANSFER\n{flow}\n 995{rng.digits(8)}")

    return render


def _atm(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    cash_id = rng.random_int(1120, 1150)
    location = location_in_city(ctx).upper()
    return Narration(f"ATM WDL-ATM CASH {cash_id}\n{location}\n{ctx.user_city}", "")


def _pos(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    merchant = rng.pick(MERCHANTS)
    ref_number = rng.digits(13)
    if rng.random_int(0, 1) == 0:
        description = f"by debit card\nSBIPOS{ref_number[:12]}{merchant}\n {ctx.user_city}"
    else:
        description = f"by debit card\nOTHPOS{ref_number}{merchant}  {ctx.user_city}"
    return Narration(description, "")


def _cash_deposit(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref_number = rng.digits(10)
    cdm_id = rng.random_int(1000, 9999)
    return Narration(f"CSH DEP (CDM)-{ref_number}\n {cdm_id}", "")


def _mandate(ctx: GenerationContext, when: date) -> Narration:
    company = ctx.rng.pick(MANDATE_COMPANIES)
    return Narration(f"DEBIT-CMP MANDATE DEBIT\n {company} - SI", "")


def _service_charge(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref_number = rng.digits(8)
    charge = rng.pick(SERVICE_CHARGES)
    return Narration(f"{charge}\n{ref_number}", ref_number)


def _cashback(ctx: GenerationContext, when: date) -> Narration:
    rng = ctx.rng
    ref_number = rng.digits(12)
    name, upi, bank = rng.pick(CASHBACK_PROVIDERS)
    description = f"BY TRANSFER-\nUPI/CR/{ref_number}/{name.ljust(8)}/{bank}/{upi}/UPI"
    return Narration(description, _transfer_reference(rng, "FROM"))


@register
class SbiProfile(BankStyleProfile):
    code = "SBI"
    display_name = "State Bank of India"

    credits = (
        Category("upi", 60, _upi(True), UPI_CREDIT),
        Category("neft", 30, _neft(True), NEFT_CREDIT),
        Category("cash_deposit", 3, _cash_deposit, CASH_DEPOSIT, cash_deposit=True),
        Category("cashback", 7, _cashback, CASHBACK),
    )
    debits = (
        Category("upi", 65, _upi(False), UPI_DEBIT),
        Category("atm", 2, _atm, ATM_WITHDRAWAL),
        Category("pos", 20, _pos, POS_DEBIT),
        Category("mandate", 10, _mandate, EMI_DEBIT),
        Category("service_charge", 3, _service_charge, BANK_CHARGES),
    )

    def salary_narration(self, employer: str, ctx: GenerationContext, when: date) -> Narration:
        rng = ctx.rng
        ref_number = rng.digits(10)
        bank_code = rng.pick(SALARY_BANK_CODES)
        branch_code = rng.random_int(1000, 9999)
        account_digits = rng.digits(8)
        description = (
            f"BY TRANSFER-\nNEFT*{bank_code}{branch_code}*P{account_digits}"
            f"\n{ref_number}*{employer.upper()}\nLIMITED*Salary"
        )
        return Narration(description, f"TRANSFER\n FROM\n 995{rng.digits(8)}")

    def generate_reference(self, when: date, ctx: GenerationContext) -> str:
        return _transfer_reference(ctx.rng, "TO")
