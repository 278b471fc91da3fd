"""Interface shared by schedule exporters."""

from abc import ABC, abstractmethod
from typing import Any

from scheduling.models import Schedule


class BaseTransformer(ABC):
    """Turns one contact's recurring events into an exportable document.
    
    A transformer is used in two steps: transform() builds the document
    in memory, then save() writes it out. Calling save() first is an error.
    """
    
    @abstractmethod
    def transform(self, schedule: Schedule, owner: str) -> Any:
        """Build the export document for a schedule.
        
        Args:
            schedule: The contact's weekly events, in storage order.
            owner: Contact name, used to label the document.
            
        Returns:
            The in-memory document, e.g. an icalendar Calendar.
        """
        pass
    
    @abstractmethod
    def save(self, output_path: str) -> None:
        """Write the document built by the last transform() call.
        
        Args:
            output_path: Destination file.
            
        Raises:
            RuntimeError: If transform() has not been called.
        """
        pass
