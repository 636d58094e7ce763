from jsonenvelope.web.endpoints import EnvelopeRoutes, envelope_response, json_endpoint

__all__ = ["EnvelopeRoutes", "envelope_response", "json_endpoint"]
