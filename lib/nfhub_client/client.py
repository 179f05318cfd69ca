from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping

import httpx

from .config_types import ClientConfig, Environment
from .endpoints import ENDPOINTS
from .errors import ConfigurationError, NetworkError
from .params import ParamLike, with_param, without_params
from .results import Err, ErrorKind, RequestResult, Result
from .transport import HeaderList, Transport

logger = logging.getLogger(__name__)

Params = Iterable[ParamLike] | None


class NfhubClient:
    def __init__(
            self,
            cfg: ClientConfig | None = None,
            *,
            base_urls: Mapping[Environment, str] | None = None,
            transport: httpx.BaseTransport | None = None,
    ):
        self._cfg = cfg if cfg is not None else ClientConfig()
        self._t = Transport(self._cfg, base_urls=base_urls, transport=transport)

    def close(self) -> None:
        self._t.close()

    def __enter__(self) -> "NfhubClient":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    # --- configuration ---
    @property
    def config(self) -> ClientConfig:
        return self._cfg

    def set_token(self, token: str) -> None:
        self._cfg.token = token

    def set_environment(self, environment: Environment | int | str) -> None:
        """Select the target API. Unknown codes are ignored."""
        env = Environment.parse(environment)
        if env is None:
            logger.debug("ignoring unknown environment %r", environment)
            return
        self._cfg.environment = env

    def set_debug(self, debug: bool) -> None:
        self._cfg.debug = bool(debug)

    def set_upload(self, upload: bool) -> None:
        self._cfg.upload = bool(upload)

    def set_decode(self, decode: bool) -> None:
        self._cfg.decode = bool(decode)

    def get_environment(self) -> Environment | None:
        return self._cfg.environment

    def get_debug(self) -> bool:
        return self._cfg.debug

    def get_upload(self) -> bool:
        return self._cfg.upload

    def get_decode(self) -> bool:
        return self._cfg.decode

    # --- low level ---
    def request(
            self,
            method: str,
            path: str,
            *,
            body: Mapping[str, Any] | None = None,
            params: Params = None,
            headers: HeaderList = (),
    ) -> RequestResult:
        """Unclassified request; raises ConfigurationError / NetworkError."""
        verb = method.upper()
        if verb in ("POST", "PUT"):
            return getattr(self._t, verb.lower())(path, body, params, headers)
        if verb in ("GET", "DELETE", "OPTIONS"):
            return getattr(self._t, verb.lower())(path, params, headers)
        return self._t.execute(verb, path, params=params, headers=headers)

    def _call(
            self,
            name: str,
            *,
            params: Params = None,
            body: Mapping[str, Any] | None = None,
            headers: HeaderList = (),
            **path_args: Any,
    ) -> Result:
        endpoint = ENDPOINTS[name]
        path = endpoint.format_path(**path_args)
        try:
            result = self.request(endpoint.method, path, body=body, params=params, headers=headers)
        except ConfigurationError as e:
            return Err(ErrorKind.CONFIGURATION, str(e))
        except NetworkError as e:
            return Err(ErrorKind.NETWORK, str(e))
        return endpoint.check.classify(result)

    @staticmethod
    def _with_company(data: Mapping[str, Any] | None, company_id: int) -> dict[str, Any]:
        body = dict(data or {})
        body["company_id"] = company_id
        return body

    # --- companies ---
    def company_get(self, cnpj: str = "", params: Params = None) -> Result:
        params = without_params(params, "cnpj_company")
        if cnpj:
            params = with_param(params, "cnpj_company", cnpj)
        return self._call("company_get", params=params)

    def company_create(self, data: Mapping[str, Any], params: Params = None) -> Result:
        return self._call("company_create", body=dict(data), params=params)

    def company_update(self, company_id: int, data: Mapping[str, Any], params: Params = None) -> Result:
        return self._call("company_update", company_id=int(company_id), body=dict(data), params=params)

    def company_delete(self, company_id: int | None, params: Params = None) -> Result:
        if not company_id:
            return Err(ErrorKind.VALIDATION, "Company id is required for deletion")
        return self._call("company_delete", company_id=int(company_id), params=params)

    # --- customers ---
    def customers_list(self, company_id: int, params: Params = None) -> Result:
        params = with_param(params, "company_id", company_id)
        return self._call("customers_list", params=params)

    def customer_create(self, company_id: int, data: Mapping[str, Any], params: Params = None) -> Result:
        return self._call("customer_create", body=self._with_company(data, company_id), params=params)

    def customer_get(self, customer_id: int, company_id: int, params: Params = None) -> Result:
        params = with_param(params, "company_id", company_id)
        return self._call("customer_get", customer_id=int(customer_id), params=params)

    def customer_update(
            self,
            customer_id: int,
            company_id: int,
            data: Mapping[str, Any],
            params: Params = None,
    ) -> Result:
        return self._call(
            "customer_update",
            customer_id=int(customer_id),
            body=self._with_company(data, company_id),
            params=params,
        )

    # --- billing ---
    def installment_create(self, company_id: int, data: Mapping[str, Any], params: Params = None) -> Result:
        return self._call("installment_create", body=self._with_company(data, company_id), params=params)

    # --- accountant ---
    def accountant_permissions_get(self, company_id: int, cpfcnpj: str, params: Params = None) -> Result:
        params = with_param(params, "cpfcnpj", cpfcnpj)
        params = with_param(params, "company_id", company_id)
        return self._call("accountant_permissions_get", params=params)

    def accountant_permissions_update(self, company_id: int, data: Mapping[str, Any], params: Params = None) -> Result:
        return self._call(
            "accountant_permissions_update", body=self._with_company(data, company_id), params=params
        )

    def accountant_invoices_list(self, cpfcnpj: str, company_cpfcnpj: str, params: Params = None) -> Result:
        params = with_param(params, "cpfcnpj", cpfcnpj)
        params = with_param(params, "company_cpfcnpj", company_cpfcnpj)
        return self._call("accountant_invoices_list", params=params)

    # --- banks / categories ---
    def banks_list(self, params: Params = None) -> Result:
        return self._call("banks_list", params=params)

    def company_banks_list(self, company_id: int, cpfcnpj: str, filter: str, params: Params = None) -> Result:
        params = with_param(params, "cpfcnpj", cpfcnpj)
        params = with_param(params, "company_id", company_id)
        params = with_param(params, "filter", filter)
        return self._call("company_banks_list", params=params)

    def categories_list(
            self,
            company_id: int,
            cpfcnpj: str,
            filter: str,
            category_id: int | None = None,
            params: Params = None,
    ) -> Result:
        params = with_param(params, "cpfcnpj", cpfcnpj)
        params = with_param(params, "company_id", company_id)
        params = with_param(params, "filter", filter)
        params = with_param(params, "id", category_id)
        return self._call("categories_list", params=params)

    # --- certificates ---
    def certificate_pem_get(self, certificate_id: int, params: Params = None) -> Result:
        params = with_param(params, "certificate_id", certificate_id)
        return self._call("certificate_pem_get", certificate_id=int(certificate_id), params=params)
