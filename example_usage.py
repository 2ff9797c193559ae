#!/usr/bin/env python3
"""
Basic usage examples for Lalamove Python client library.

This script walks through a full delivery against the Lalamove sandbox:
quotation, order, priority fee, driver lookup and cancellation.

Requires LALAMOVE_API_KEY and LALAMOVE_API_SECRET in the environment.
"""

import logging
import sys
import time

from lalamove_client import APIError, LalamoveClient, LalamoveClientError, Outcome


def wait_for_driver(client, order_id, timeout=120, interval=15):
    """Poll an order until a driver is assigned, or return None."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        order = client.get_order(order_id)
        print(f"   Status: {order['status']}")
        if order["status"] == "ON_GOING":
            return order["driverId"]
        time.sleep(interval)
    return None


def main():
    """Run basic usage examples."""
    logging.basicConfig(level=logging.DEBUG)

    print("=== Lalamove Python Client Basic Usage Examples ===\n")

    print("1. Creating client from environment...")
    try:
        client = LalamoveClient.from_env(debug=True)
    except LalamoveClientError as e:
        print(f"   ✗ {e}")
        return 1
    print(f"   Environment: {client.environment.value} ({client.base_url})")
    print(f"   Market: {client.market}\n")

    with client:
        try:
            print("2. Listing cities...")
            cities = client.cities()
            print(f"   ✓ {len(cities)} cities\n")

            print("3. Requesting quotation...")
            quotation = client.get_quotation({
                "serviceType": "MOTORCYCLE",
                "stops": [
                    {"coordinates": {"lat": "3.118270", "lng": "101.676720"},
                     "address": "Mid Valley Megamall, Mid Valley City, 58000 Kuala Lumpur"},
                    {"coordinates": {"lat": "3.148984", "lng": "101.713302"},
                     "address": "Pavilion KL, 168, Bukit Bintang Street, 55100 Kuala Lumpur"},
                ],
                "language": "en_MY",
            })
            print(f"   ✓ Quotation {quotation['quotationId']}: "
                  f"{quotation['priceBreakdown']['total']} {quotation['priceBreakdown'].get('currency', '')}\n")

            print("4. Creating order...")
            sender, recipient = quotation["stops"][0], quotation["stops"][1]
            order = client.create_order({
                "quotationId": quotation["quotationId"],
                "sender": {"stopId": sender["stopId"], "name": "Amir", "phone": "+60123456789"},
                "recipients": [{"stopId": recipient["stopId"], "name": "Rajesh", "phone": "+60198765432"}],
            })
            order_id = order["orderId"]
            print(f"   ✓ Order {order_id}\n")

            print("5. Adding priority fee...")
            order = client.add_priority_fee(order_id, 10)
            print(f"   ✓ Priority fee: {order['priceBreakdown'].get('priorityFee')}\n")

            print("6. Waiting for driver...")
            driver_id = wait_for_driver(client, order_id)
            if driver_id:
                driver = client.get_driver_details(order_id, driver_id)
                print(f"   ✓ Driver: {driver['name']} ({driver['phone']})\n")
            else:
                print("   ✗ No driver assigned\n")

            print("7. Cancelling order...")
            response = client.cancel_order(order_id)
            print(f"   ✓ Cancelled ({response.status_code})\n")

        except APIError as e:
            if e.outcome is Outcome.CLIENT_FAULT:
                print(f"   ✗ Rejected by API: {e}")
            else:
                print(f"   ✗ API failure: {e}")
            return 1

    print("=== Examples completed ===")
    return 0


if __name__ == "__main__":
    sys.exit(main())
