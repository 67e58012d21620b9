"""
Square Connect client
One method per Square Connect endpoint
"""

import logging
from typing import Any, Callable, Dict, List, Mapping, Optional, TypeVar

from square_connect.client.http_client import (
    HttpClient,
    HttpMethod,
    construct_query_string,
    encode_form_body,
)
from square_connect.config.client_config import ClientConfig, SQUARE_API_HOST
from square_connect.models.receipt_info import ReceiptInfo
from square_connect.utils.receipt_parser import parse_receipt_html


T = TypeVar("T")

# Completion callback: (error, result), exactly one of them is set
ResultCallback = Callable[[Optional[Exception], Any], None]

logger = logging.getLogger(__name__)


class SquareClient:
    """
    Client for the Square Connect v1/v2 API

    Every endpoint method returns its result or raises. Passing
    ``callback`` instead delivers ``callback(error, None)`` or
    ``callback(None, result)`` exactly once and returns None.

    Example:
        >>> client = SquareClient("LOCATION_ID", "ACCESS_TOKEN")
        >>> items = client.list_items()
        >>> client.get_item("ITEM_ID", callback=lambda err, item: print(err or item))
    """

    def __init__(
        self,
        location_id: str,
        access_token: str,
        extended_debug_info: bool = False,
        base_url: str = SQUARE_API_HOST,
        timeout: Optional[float] = None,
    ) -> None:
        """
        Create a new Square client

        Args:
            location_id: Square location ID
            access_token: Access token for that location
            extended_debug_info: Attach raw response bodies to API errors
            base_url: API host
            timeout: Request timeout in seconds, None waits indefinitely
        """
        self.config = ClientConfig(
            location_id=location_id,
            access_token=access_token,
            extended_debug_info=extended_debug_info,
            base_url=base_url,
            timeout=timeout,
        )
        self._http = HttpClient(self.config)

    @classmethod
    def from_config(cls, config: ClientConfig) -> "SquareClient":
        """Create a client from a resolved ClientConfig"""
        return cls(
            config.location_id,
            config.access_token,
            extended_debug_info=config.extended_debug_info,
            base_url=config.base_url,
            timeout=config.timeout,
        )

    @property
    def location_id(self) -> str:
        return self.config.location_id

    @property
    def http(self) -> HttpClient:
        """Underlying transport"""
        return self._http

    def _dispatch(
        self,
        operation: Callable[[], T],
        callback: Optional[ResultCallback],
    ) -> Optional[T]:
        """Run operation, returning its result or handing the outcome to callback"""
        if callback is None:
            return operation()

        try:
            result = operation()
        except Exception as e:
            callback(e, None)
            return None

        callback(None, result)
        return None

    def _call(
        self,
        path: str,
        method: HttpMethod = HttpMethod.GET,
        data: Optional[Any] = None,
        callback: Optional[ResultCallback] = None,
        unwrap: Optional[Callable[[Any], Any]] = None,
    ) -> Any:
        def operation() -> Any:
            result = self._http.execute(
                self._http.build_request(path, method, json_body=data)
            )
            return unwrap(result) if unwrap else result

        return self._dispatch(operation, callback)

    # ----------------------------------------------------------
    #    Merchant
    # ----------------------------------------------------------

    def get_merchant_profile(self, *, callback: Optional[ResultCallback] = None) -> Any:
        """Merchant profile for the access token"""
        return self._call("/v1/me", callback=callback)

    def list_roles(self, *, callback: Optional[ResultCallback] = None) -> Any:
        return self._call("/v1/me/roles", callback=callback)

    # ----------------------------------------------------------
    #    Employees
    # ----------------------------------------------------------

    def list_employees(self, *, callback: Optional[ResultCallback] = None) -> Any:
        return self._call("/v1/me/employees", callback=callback)

    def create_employee(
        self,
        data: Dict[str, Any],
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        """
        Create an employee

        Args:
            data: Employee properties, e.g. first_name, last_name, email
        """
        return self._call(
            "/v1/me/employees", HttpMethod.POST, data, callback=callback
        )

    def update_employee(
        self,
        employee_id: str,
        data: Dict[str, Any],
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/me/employees/{employee_id}", HttpMethod.PUT, data, callback=callback
        )

    # ----------------------------------------------------------
    #    Items and variations
    # ----------------------------------------------------------

    def list_items(self, *, callback: Optional[ResultCallback] = None) -> Any:
        return self._call(f"/v1/{self.location_id}/items", callback=callback)

    def get_item(self, item_id: str, *, callback: Optional[ResultCallback] = None) -> Any:
        return self._call(f"/v1/{self.location_id}/items/{item_id}", callback=callback)

    def create_item(
        self,
        data: Dict[str, Any],
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/{self.location_id}/items", HttpMethod.POST, data, callback=callback
        )

    def update_item(
        self,
        item_id: str,
        data: Dict[str, Any],
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/{self.location_id}/items/{item_id}",
            HttpMethod.PUT,
            data,
            callback=callback,
        )

    def delete_item(self, item_id: str, *, callback: Optional[ResultCallback] = None) -> Any:
        return self._call(
            f"/v1/{self.location_id}/items/{item_id}",
            HttpMethod.DELETE,
            callback=callback,
        )

    def create_variation(
        self,
        item_id: str,
        data: Dict[str, Any],
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        """Create a variation for an existing item"""
        return self._call(
            f"/v1/{self.location_id}/items/{item_id}/variations",
            HttpMethod.POST,
            data,
            callback=callback,
        )

    def update_variation(
        self,
        item_id: str,
        variation_id: str,
        data: Dict[str, Any],
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/{self.location_id}/items/{item_id}/variations/{variation_id}",
            HttpMethod.PUT,
            data,
            callback=callback,
        )

    def delete_variation(
        self,
        item_id: str,
        variation_id: str,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/{self.location_id}/items/{item_id}/variations/{variation_id}",
            HttpMethod.DELETE,
            callback=callback,
        )

    def upload_item_image(
        self,
        item_id: str,
        image_url: str,
        image_extension: str,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        """
        Upload an item image fetched from a URL

        The image is downloaded as raw bytes and re-posted as
        multipart/form-data under the ``image_data`` field.

        Args:
            item_id: Item to attach the image to
            image_url: Where to download the image from, also used as filename
            image_extension: Image type, e.g. "png" or "jpeg"
        """
        def operation() -> Any:
            logger.debug(f"Uploading image {image_url} for item {item_id}")
            image = self._http.fetch_raw(image_url)

            form_body = encode_form_body(
                "image_data",
                image_url,
                image,
                f"image/{image_extension}",
            )

            descriptor = self._http.build_request(
                f"/v1/{self.location_id}/items/{item_id}/image",
                HttpMethod.POST,
                form_body=form_body,
            )
            descriptor.headers["Content-Type"] = form_body.content_type
            descriptor.headers["Content-Disposition"] = (
                f"form-data; name=image_data; filename={image_url}"
            )

            return self._http.execute(descriptor)

        return self._dispatch(operation, callback)

    # ----------------------------------------------------------
    #    Inventory and categories
    # ----------------------------------------------------------

    def list_inventory(self, *, callback: Optional[ResultCallback] = None) -> Any:
        """Inventory counts of items and variations at the location"""
        return self._call(f"/v1/{self.location_id}/inventory", callback=callback)

    def list_categories(self, *, callback: Optional[ResultCallback] = None) -> Any:
        return self._call(f"/v1/{self.location_id}/categories", callback=callback)

    def create_category(
        self,
        data: Dict[str, Any],
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/{self.location_id}/categories",
            HttpMethod.POST,
            data,
            callback=callback,
        )

    def delete_category(
        self,
        category_id: str,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/{self.location_id}/categories/{category_id}",
            HttpMethod.DELETE,
            callback=callback,
        )

    # ----------------------------------------------------------
    #    Customers
    # ----------------------------------------------------------

    def list_customers(self, *, callback: Optional[ResultCallback] = None) -> Any:
        return self._call("/v2/customers", callback=callback)

    def get_customer(
        self,
        customer_id: str,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(f"/v2/customers/{customer_id}", callback=callback)

    # ----------------------------------------------------------
    #    Transactions and payments
    # ----------------------------------------------------------

    def list_transactions(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Optional[List[Dict[str, Any]]]:
        """
        List transactions for the location

        Args:
            params: Query parameters such as begin_time, end_time,
                sort_order or cursor. Values are sent unencoded.

        Returns:
            The ``transactions`` array of the response, empty when
            the location has none
        """
        return self._call(
            f"/v2/locations/{self.location_id}/transactions"
            f"{construct_query_string(params)}",
            callback=callback,
            unwrap=lambda result: (result or {}).get("transactions", []),
        )

    def get_transaction(
        self,
        transaction_id: str,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Optional[Dict[str, Any]]:
        """Fetch one transaction, unwrapped from its envelope"""
        return self._call(
            f"/v2/locations/{self.location_id}/transactions/{transaction_id}",
            callback=callback,
            unwrap=lambda result: (result or {}).get("transaction"),
        )

    def list_payments(
        self,
        params: Optional[Mapping[str, Any]] = None,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        """
        List payments for the location

        Args:
            params: Query parameters such as begin_time, end_time,
                order or limit. Values are sent unencoded.
        """
        return self._call(
            f"/v1/{self.location_id}/payments{construct_query_string(params)}",
            callback=callback,
        )

    def get_payment(
        self,
        payment_id: str,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Any:
        return self._call(
            f"/v1/{self.location_id}/payments/{payment_id}", callback=callback
        )

    # ----------------------------------------------------------
    #    Receipts
    # ----------------------------------------------------------

    def get_customer_info_from_receipt(
        self,
        receipt_url: str,
        *,
        callback: Optional[ResultCallback] = None,
    ) -> Optional[ReceiptInfo]:
        """
        Scrape the chip AID and cardholder name from a receipt page

        Only meaningful for card payments. Fields that cannot be found
        are None; that is not an error.

        Args:
            receipt_url: Receipt URL of the payment
        """
        def operation() -> ReceiptInfo:
            response = self._http.fetch(receipt_url, accept="text/html")
            return parse_receipt_html(response.text)

        return self._dispatch(operation, callback)

    def close(self) -> None:
        """Close the underlying HTTP session"""
        self._http.close()

    def __enter__(self) -> "SquareClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
