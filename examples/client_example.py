"""
Usage Examples for the Square Connect client
Demonstrates configuration, calls, callbacks and error handling
"""

import logging

import requests

from square_connect import (
    ApiError,
    ConfigLoader,
    SquareClient,
)


# =============================================================================
# Example 1: Direct Construction
# =============================================================================

def direct_example() -> None:
    """Construct a client from the three required values"""
    with SquareClient("YOUR_LOCATION_ID", "YOUR_ACCESS_TOKEN") as client:
        profile = client.get_merchant_profile()
        print(f"Merchant: {profile.get('name')}")

        for item in client.list_items():
            print(f"  {item['id']}: {item['name']}")


# =============================================================================
# Example 2: Environment Configuration
# =============================================================================

def env_config_example() -> None:
    """
    Load configuration from environment variables

    Set these environment variables before running:

    export SQUARE_LOCATION_ID="YOUR_LOCATION_ID"
    export SQUARE_ACCESS_TOKEN="YOUR_ACCESS_TOKEN"
    export SQUARE_EXTENDED_DEBUG_INFO="true"
    """
    config = ConfigLoader().load()
    client = SquareClient.from_config(config)

    transactions = client.list_transactions({
        "begin_time": "2017-01-01T00:00:00Z",
        "sort_order": "DESC",
    })
    print(f"Found {len(transactions)} transactions")


# =============================================================================
# Example 3: Error Handling
# =============================================================================

def error_handling_example() -> None:
    """Tell API errors apart from transport failures"""
    client = SquareClient("YOUR_LOCATION_ID", "YOUR_ACCESS_TOKEN", extended_debug_info=True)

    try:
        client.get_item("DOES_NOT_EXIST")
    except ApiError as e:
        print(f"Square rejected the call: {e.status_code} {e.message}")
        print(f"Raw body: {e.body}")
    except requests.RequestException as e:
        print(f"Could not reach Square: {e}")


# =============================================================================
# Example 4: Callbacks
# =============================================================================

def callback_example() -> None:
    """Receive (error, result) through a callback instead of a return value"""
    client = SquareClient("YOUR_LOCATION_ID", "YOUR_ACCESS_TOKEN")

    def on_receipt(err, info):
        if err:
            print(f"Receipt lookup failed: {err}")
            return
        print(f"AID: {info.aid}, name on card: {info.name_on_card}")

    client.get_customer_info_from_receipt(
        "https://squareup.com/receipt/preview/YOUR_PAYMENT_ID",
        callback=on_receipt,
    )


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    direct_example()
