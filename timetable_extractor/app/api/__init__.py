from .models import FilterRequest, FilterResponse, ParseResponse

__all__ = ["FilterRequest", "FilterResponse", "ParseResponse"]
