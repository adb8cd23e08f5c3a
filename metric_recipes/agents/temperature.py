"""
Temperature Agent - Converts oven temperatures in recipe text to Celsius
"""
from metric_recipes.agents.base import AgentResult, BaseAgent
from metric_recipes.utils.oven_temperatures import convert_oven_temperatures


class TemperatureAgent(BaseAgent):
    """Agent responsible for Fahrenheit and gas mark oven temperatures."""

    def convert(self, text: str) -> AgentResult[str]:
        """Convert oven temperatures, optionally followed by a gas mark."""
        try:
            converted = convert_oven_temperatures(text, gas_mark=self.options.gas_mark)
            changed = converted != text
            if changed:
                self.logger.debug(f"Converted oven temperatures: '{text}' -> '{converted}'")

            return AgentResult(
                success=True,
                data=converted,
                metadata={'changed': changed}
            )

        except Exception as e:
            return self._handle_error(e, "Error converting oven temperatures")
