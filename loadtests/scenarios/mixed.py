"""Mixed storefront workload scenario.

Combines the shopper and administrator journeys with weights that model
realistic storefront traffic. This is the recommended scenario for load
baseline testing.
"""

from locust import HttpUser, between

from loadtests.scenarios.admin import CatalogueUpkeepJourney, FulfilmentJourney
from loadtests.scenarios.shopping import (
    BrowseCatalogueJourney,
    CheckoutJourney,
    DeclinedCheckoutJourney,
    SettlementWebhookJourney,
)


class MixedWorkloadUser(HttpUser):
    """Realistic mixed workload.

    Browsing (60%): anonymous catalogue reads, the bulk of traffic.

    Checkout (30%):
    - Paid checkout: most common write path
    - Declined card: exercises the Failed checkout path
    - Settling payment: order placed as pending, then reconciled by webhook

    Admin (10%):
    - Fulfilment: status updates on paid orders
    - Catalogue upkeep: occasional product churn
    """

    wait_time = between(0.5, 3.0)
    tasks = {
        BrowseCatalogueJourney: 60,
        CheckoutJourney: 20,
        DeclinedCheckoutJourney: 5,
        SettlementWebhookJourney: 5,
        FulfilmentJourney: 7,
        CatalogueUpkeepJourney: 3,
    }
