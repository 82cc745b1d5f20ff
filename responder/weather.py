"""
Current temperature lookup via Open-Meteo.
"""
import requests

import config


class WeatherError(RuntimeError):
    pass


class WeatherClient:
    def __init__(self, base_url: str = config.WEATHER_API_URL, timeout: float = config.WEATHER_TIMEOUT):
        self.base_url = base_url
        self.timeout = timeout

    def current_temperature(self, latitude: float, longitude: float) -> float:
        """Temperature (°C) at the given coordinates."""
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": "temperature_2m",
        }
        try:
            r = requests.get(self.base_url, params=params, timeout=self.timeout)
            r.raise_for_status()
            data = r.json()
        except requests.exceptions.RequestException as e:
            raise WeatherError(f"Weather request failed: {e}") from e
        except ValueError as e:
            raise WeatherError(f"Weather response is not JSON: {e}") from e

        try:
            return float(data["current"]["temperature_2m"])
        except (KeyError, TypeError, ValueError) as e:
            raise WeatherError(f"Unexpected weather response: {data!r}") from e
