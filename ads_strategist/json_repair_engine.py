"""
JSON Repair Engine for model responses
Layered strategies: direct parse, extraction from wrapped text, json-repair library
"""
import json
import logging
from typing import Any, Dict, Optional
from json_repair import repair_json


logger = logging.getLogger(__name__)


class JSONRepairEngine:
    """
    Multi-layered JSON parser for generative model output
    """

    def __init__(self):
        self.repair_attempts = 0
        self.strategies_used = []

    def repair_json_response(self, response: str) -> Dict[str, Any]:
        """
        Parse a model response into a JSON object
        Raises ValueError when no strategy yields an object
        """
        self.repair_attempts += 1
        self.strategies_used = []

        logger.debug("Starting JSON repair process", extra={
            "response_length": len(response),
            "attempt": self.repair_attempts
        })

        # Strategy 1: Try direct parsing first
        try:
            parsed = self._strategy_direct_parse(response)
            if parsed is not None:
                self.strategies_used.append("direct_parse")
                return parsed
        except ValueError as e:
            logger.debug("Direct parse failed", extra={"error": str(e)})

        # Strategy 2: Extract the outermost object from surrounding prose or fences
        parsed = self._strategy_extract_json(response)
        if parsed is not None:
            self.strategies_used.append("extract_json")
            return parsed

        # Strategy 3: Use json-repair library
        parsed = self._strategy_json_repair_lib(response)
        if parsed is not None:
            self.strategies_used.append("json_repair_lib")
            return parsed

        logger.warning("All repair strategies failed", extra={
            "response_preview": response[:300]
        })
        raise ValueError("Model response does not contain a JSON object")

    def _strategy_direct_parse(self, response: str) -> Optional[Dict[str, Any]]:
        """Strategy 1: Try parsing the response directly"""
        parsed_data = json.loads(response)
        if isinstance(parsed_data, dict):
            return parsed_data
        return None

    def _strategy_extract_json(self, response: str) -> Optional[Dict[str, Any]]:
        """Strategy 2: Extract JSON between balanced braces (markdown fences, leading prose)"""
        start_idx = response.find('{')
        if start_idx == -1:
            return None

        brace_count = 0
        end_idx = -1
        in_string = False
        escaped = False

        for i in range(start_idx, len(response)):
            char = response[i]
            if in_string:
                if escaped:
                    escaped = False
                elif char == '\\':
                    escaped = True
                elif char == '"':
                    in_string = False
            elif char == '"':
                in_string = True
            elif char == '{':
                brace_count += 1
            elif char == '}':
                brace_count -= 1
                if brace_count == 0:
                    end_idx = i
                    break

        if end_idx == -1:
            return None

        try:
            parsed_data = json.loads(response[start_idx:end_idx + 1])
        except ValueError as e:
            logger.debug("JSON extraction failed", extra={"error": str(e)})
            return None

        return parsed_data if isinstance(parsed_data, dict) else None

    def _strategy_json_repair_lib(self, response: str) -> Optional[Dict[str, Any]]:
        """Strategy 3: Use the json-repair library"""
        repaired = repair_json(response, return_objects=True)

        if isinstance(repaired, dict) and repaired:
            return repaired
        return None


def parse_llm_json_with_repair(response: str) -> Dict[str, Any]:
    """
    Parse a model JSON response with the repair strategies above
    Raises ValueError if the response holds no recoverable object
    """
    engine = JSONRepairEngine()
    result = engine.repair_json_response(response)

    logger.info("JSON repair successful", extra={
        "strategies_used": engine.strategies_used,
        "result_keys": list(result.keys())
    })

    return result
