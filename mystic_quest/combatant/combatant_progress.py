from pydantic import BaseModel, Field


class PlayerProgress(BaseModel):
    """
    Tracks what a player has gathered during a battle. Only player combatants
    carry one.
    """

    treasures_collected: int = Field(
        default=0,
        ge=0,
        description="The number of treasures collected so far.",
    )

    def collect_treasure(self) -> int:
        """
        Adds one treasure to the counter.

        Returns:
            int: The new number of treasures collected.

        """
        self.treasures_collected += 1
        return self.treasures_collected
