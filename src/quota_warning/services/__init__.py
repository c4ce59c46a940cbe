from .quota_alert_service import QuotaAlertEvaluator

__all__ = ["QuotaAlertEvaluator"]
