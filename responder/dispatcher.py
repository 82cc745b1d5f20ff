# responder/dispatcher.py
# Turns one user message into one bot reply.
# Order: calculator -> coin -> dice -> weather -> corpus match -> arithmetic -> unknown

from __future__ import annotations

import random
from typing import Any, Dict, Optional

import config
from responder.arithmetic import ExpressionError, evaluate, extract_expression, format_number
from responder.calculator import Calculator
from responder.chance import flip_coin, roll_die
from responder.matcher import IntentMatcher
from responder.normalizer import normalize
from responder.weather import WeatherClient, WeatherError


def _reply(content: str, match_type: str, **extra: Any) -> Dict[str, Any]:
    return {"content": content, "match_type": match_type, **extra}


class ResponseDispatcher:
    def __init__(
        self,
        matcher: IntentMatcher,
        weather: Optional[WeatherClient] = None,
        rng: Optional[random.Random] = None,
    ):
        self.matcher = matcher
        self.weather = weather or WeatherClient()
        self.rng = rng or random.Random()
        # session_id -> calculator widget
        self.calculators: Dict[str, Calculator] = {}

    def calculator(self, session_id: str = "default") -> Calculator:
        if session_id not in self.calculators:
            self.calculators[session_id] = Calculator()
        return self.calculators[session_id]

    def new_chat(self, session_id: str = "default") -> Dict[str, Any]:
        self.calculators.pop(session_id, None)
        return _reply(config.GREETING_MESSAGE, "none")

    def respond(
        self,
        message: str,
        session_id: str = "default",
        latitude: Optional[float] = None,
        longitude: Optional[float] = None,
    ) -> Dict[str, Any]:
        message = (message or "").strip()
        if not message:
            return _reply(config.GREETING_MESSAGE, "none")

        lower = normalize(message.lower())
        calc = self.calculator(session_id)

        # 1) Calculator widget
        if lower == "calculator":
            calc.open()
            return _reply(config.CALCULATOR_OPEN_MESSAGE, "calculator")

        if calc.is_open and lower != "exit":
            return _reply(config.CALCULATOR_BUSY_MESSAGE, "calculator")

        if lower == "exit":
            calc.close()
            return _reply(config.CALCULATOR_CLOSED_MESSAGE, "calculator")

        # 2) Chance
        if "flip a coin" in lower or "flip coin" in lower:
            return _reply(f"You flipped {flip_coin(self.rng)}", "coin")

        if "roll a dice" in lower or "roll a die" in lower:
            return _reply(f"You rolled a {roll_die(self.rng)}", "dice")

        # 3) Weather
        if "weather" in lower or "temperature" in lower:
            return self._weather_reply(latitude, longitude)

        # 4) Corpus match
        entry, score = self.matcher.match(lower)
        if entry is not None:
            return _reply(
                entry.response,
                "intent",
                score=score,
                matched_prompt=entry.prompt,
            )

        # 5) Arithmetic on the raw message
        expression = extract_expression(message)
        if expression is not None:
            try:
                result = format_number(evaluate(expression))
                return _reply(f"The answer is {result}", "arithmetic", expression=expression)
            except ExpressionError:
                pass  # not arithmetic after all

        return _reply(
            config.UNKNOWN_MESSAGE,
            "none",
            score=score,
            suggestions=self.matcher.top_suggestions(lower),
        )

    def _weather_reply(self, latitude: Optional[float], longitude: Optional[float]) -> Dict[str, Any]:
        if latitude is None or longitude is None:
            return _reply(config.LOCATION_MESSAGE, "weather")
        try:
            temp = self.weather.current_temperature(latitude, longitude)
        except WeatherError as e:
            print(f"WARNING: {e}")
            return _reply(config.WEATHER_FAILED_MESSAGE, "weather")
        return _reply(
            f"The temperature in your area is {temp:g}°C",
            "weather",
            temperature=temp,
        )
