"""Smoke script exercising every endpoint against an in-process app.

Prints the collected status codes and bodies as JSON for manual inspection.
"""

from calc_api.main import create_app
from calc_api.core.config import Settings
from fastapi.testclient import TestClient
import json


def run():
    settings = Settings(environment="development")
    app = create_app(settings_override=settings)
    client = TestClient(app, raise_server_exceptions=False)

    calls = {
        "root": "/",
        "convert": "/convert?from=EUR&to=USD&amount=100",
        "convert_lowercase": "/convert?from=usd&to=gbp&amount=100",
        "convert_missing": "/convert?from=EUR&to=USD",
        "convert_invalid": "/convert?from=EUR&to=JPY&amount=-1",
        "rates": "/rates",
        "tva": "/tva?ht=100&taux=20",
        "tva_ht": "/tva/ht?ttc=120&taux=20",
        "tva_rates": "/tva/rates",
        "remise": "/remise?prix=100&pourcentage=10",
        "remise_fixe": "/remise/fixe?prix=100&montant=15",
        "remise_fixe_too_big": "/remise/fixe?prix=100&montant=150",
        "remise_original": "/remise/original?prixFinal=90&pourcentage=10",
        "not_found": "/nope",
    }
    results = {}
    for name, url in calls.items():
        resp = client.get(url)
        results[name] = {"status": resp.status_code, "body": resp.json()}
    print(json.dumps(results, indent=2, ensure_ascii=False))


if __name__ == "__main__":
    run()
