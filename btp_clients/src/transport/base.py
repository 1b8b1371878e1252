from typing import Dict, List, Optional, Tuple, Union

import requests

Headers = Dict[str, Union[str, List[str]]]


class Sender:
    """Contrato mínimo del transporte HTTP que usan los servicios."""

    def set_options(self, options) -> None:
        raise NotImplementedError

    def send_request(
        self,
        method: str,
        url: str,
        body=None,
        headers: Optional[Headers] = None,
        cookies: Optional[Dict[str, str]] = None,
        auth: Optional[Tuple[str, str]] = None,
        raise_for_status: bool = True,
    ) -> requests.Response:
        raise NotImplementedError

    def upload_request(
        self,
        method: str,
        url: str,
        file_path: str,
        field_name: str,
        headers: Optional[Headers] = None,
        cookies: Optional[Dict[str, str]] = None,
    ) -> requests.Response:
        raise NotImplementedError
