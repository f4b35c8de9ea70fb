from typing import Dict, Optional

from calc_api.core.errors import MissingParametersError


def require_params(params: Dict[str, Optional[str]]) -> None:
    """Reject the request when any query parameter is absent or empty.

    ``received`` echoes only the parameters that were actually sent.
    """
    received = {name: value for name, value in params.items() if value is not None}
    if any(not value for value in params.values()):
        raise MissingParametersError(required=params.keys(), received=received)
