"""Domain constants shared by services, routers and error handlers."""

from typing import Dict, Tuple

SUPPORTED_CURRENCIES: Tuple[str, ...] = ("EUR", "USD", "GBP")

# French VAT reference rates, in percent
STANDARD_TVA_RATES: Dict[str, float] = {
    "normal": 20,
    "intermediaire": 10,
    "reduit": 5.5,
    "particulier": 2.1,
}

# Listed by the 404 handler
AVAILABLE_ENDPOINTS: Tuple[str, ...] = (
    "GET /",
    "GET /convert",
    "GET /rates",
    "GET /tva",
    "GET /tva/ht",
    "GET /tva/rates",
    "GET /remise",
    "GET /remise/fixe",
    "GET /remise/original",
)

# Example calls advertised by the service descriptor
ENDPOINT_EXAMPLES: Tuple[str, ...] = (
    "GET /convert?from=EUR&to=USD&amount=100",
    "GET /tva?ht=100&taux=20",
    "GET /remise?prix=100&pourcentage=10",
    "GET /rates",
    "GET /tva/ht?ttc=120&taux=20",
    "GET /tva/rates",
    "GET /remise/fixe?prix=100&montant=15",
    "GET /remise/original?prixFinal=90&pourcentage=10",
)
