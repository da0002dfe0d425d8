"""TalentAI recruiting pipeline backend."""
