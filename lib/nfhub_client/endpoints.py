from __future__ import annotations

import enum
from dataclasses import dataclass
from types import MappingProxyType
from typing import Callable, Mapping

from .classify import check_message, check_status
from .results import RequestResult, Result


class Check(enum.Enum):
    MESSAGE = "message"
    STATUS = "status"

    @property
    def classify(self) -> Callable[[RequestResult], Result]:
        return check_message if self is Check.MESSAGE else check_status


@dataclass(frozen=True)
class Endpoint:
    method: str
    path: str
    check: Check

    def format_path(self, **kwargs) -> str:
        return self.path.format(**kwargs)


_ENDPOINTS = {
    "company_get": Endpoint("GET", "/companies", Check.MESSAGE),
    "company_create": Endpoint("POST", "/companies", Check.STATUS),
    "company_update": Endpoint("PUT", "/companies/{company_id}", Check.STATUS),
    "company_delete": Endpoint("DELETE", "/companies/{company_id}", Check.STATUS),
    "customers_list": Endpoint("GET", "/customers", Check.STATUS),
    "customer_create": Endpoint("POST", "/customers", Check.STATUS),
    "customer_get": Endpoint("GET", "/customers/{customer_id}", Check.STATUS),
    "customer_update": Endpoint("PUT", "/customers/{customer_id}", Check.STATUS),
    "installment_create": Endpoint("POST", "/installments", Check.STATUS),
    "accountant_permissions_get": Endpoint("GET", "/contador/permissions", Check.STATUS),
    "accountant_permissions_update": Endpoint("POST", "/contador/permissions", Check.STATUS),
    "accountant_invoices_list": Endpoint("GET", "/contador/invoices", Check.STATUS),
    "banks_list": Endpoint("GET", "/banks", Check.MESSAGE),
    "company_banks_list": Endpoint("GET", "/list-banks", Check.MESSAGE),
    "categories_list": Endpoint("GET", "/categories", Check.MESSAGE),
    "certificate_pem_get": Endpoint("GET", "/certificates/{certificate_id}/pem", Check.STATUS),
}

ENDPOINTS: Mapping[str, Endpoint] = MappingProxyType(_ENDPOINTS)
