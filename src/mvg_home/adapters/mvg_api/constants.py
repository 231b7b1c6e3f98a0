"""Constants for the MVG routing API."""

MVG_LOCATION_PATH = "location"
MVG_CONNECTION_PATH = "connection"

# Transport types requested for connections; walking legs are added by the API
MVG_TRANSPORT_TYPES = "SCHIFF,RUFTAXI,BAHN,UBAHN,TRAM,SBAHN,BUS,REGIONAL_BUS"
