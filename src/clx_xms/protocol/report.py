from enum import StrEnum


class DeliveryReport(StrEnum):
    """Delivery report kinds accepted by the XMS API.
    
    - NONE - no delivery report
    - SUMMARY - a single report summarizing the batch
    - FULL - a single report listing every recipient
    - PER_RECIPIENT - one callback per recipient
    """
    
    NONE = "none"
    SUMMARY = "summary"
    FULL = "full"
    PER_RECIPIENT = "per_recipient"
