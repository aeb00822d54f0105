"""
Sample Alerts
=============

Canned demo alerts for the dashboard, one per common alert type.
Times are relative to ``now`` so the samples always look current.
"""

from datetime import datetime, timedelta
from typing import Any, Dict, List


def build_sample_alerts(now: datetime) -> List[Dict[str, Any]]:
    """
    Build the demo alert payloads.

    Args:
        now: Reference time for scheduled/actual times

    Returns:
        List of column-name dictionaries ready for insertion
    """
    return [
        {
            "alert_id": "ALERT-001",
            "alert_type": "vehicle",
            "category": "critical",
            "severity": "high",
            "priority": "high",
            "title": "Vehicle Maintenance Due",
            "message": "Truck #VH-001 needs service",
            "description": "Vehicle VH-001 has exceeded its maintenance interval and requires immediate service.",
            "vehicle_id": "VH-001",
            "vehicle_plate": "VH-001",
            "driver_name": "Ahmed Hassan",
            "driver_phone": "+201234567890",
            "location": "Cairo Warehouse",
            "scheduled_time": now + timedelta(days=1),
            "notify_admins": True,
            "notify_supervisors": True,
            "send_push_notification": True,
            "metadata": {
                "maintenance_type": "scheduled",
                "last_service_date": "2024-01-15",
                "next_service_due": "2024-02-15",
            },
            "tags": ["maintenance", "vehicle", "urgent"],
            "source_system": "fleet_management",
            "created_by": "system",
        },
        {
            "alert_id": "ALERT-002",
            "alert_type": "delivery",
            "category": "warning",
            "severity": "medium",
            "priority": "medium",
            "title": "Delayed Delivery",
            "message": "Order #12345 is 30 mins behind schedule",
            "description": "Delivery order 12345 is running 30 minutes behind the scheduled delivery time.",
            "customer_id": "CUST-001",
            "customer_name": "Al-Rashid Trading Co.",
            "customer_address": "123 Main Street, Cairo",
            "vehicle_id": "VH-002",
            "vehicle_plate": "VH-002",
            "driver_name": "Mohamed Ali",
            "driver_phone": "+201234567891",
            "location": "Cairo Downtown",
            "scheduled_time": now - timedelta(minutes=30),
            "actual_time": now - timedelta(minutes=30),
            "delay_minutes": 30,
            "grace_period_minutes": 15,
            "escalation_threshold_minutes": 45,
            "notify_admins": True,
            "notify_supervisors": False,
            "send_push_notification": True,
            "metadata": {
                "order_id": "12345",
                "customer_contact": "+201234567892",
                "delivery_notes": "Fragile items - handle with care",
            },
            "tags": ["delivery", "delay", "customer"],
            "source_system": "delivery_tracking",
            "created_by": "system",
        },
        {
            "alert_id": "ALERT-003",
            "alert_type": "system",
            "category": "success",
            "severity": "low",
            "priority": "low",
            "title": "Route Optimized",
            "message": "Saved 45 mins on Route A",
            "description": "Route optimization reduced travel time by 45 minutes.",
            "vehicle_id": "VH-003",
            "vehicle_plate": "VH-003",
            "driver_name": "Omar Khalil",
            "driver_phone": "+201234567893",
            "location": "Route A - Alexandria",
            "scheduled_time": now + timedelta(hours=2),
            "notify_admins": False,
            "notify_supervisors": False,
            "send_push_notification": False,
            "metadata": {
                "route_id": "ROUTE-A",
                "original_duration": "3h 30m",
                "optimized_duration": "2h 45m",
                "savings": "45 minutes",
                "fuel_savings": "15%",
            },
            "tags": ["optimization", "route", "efficiency"],
            "source_system": "route_optimization",
            "created_by": "system",
        },
        {
            "alert_id": "ALERT-004",
            "alert_type": "warehouse",
            "category": "warning",
            "severity": "medium",
            "priority": "medium",
            "title": "Low Stock Alert",
            "message": "Product #P-001 is running low",
            "description": "Product P-001 (Plastic Plates - Large) has only 50 units remaining, "
                           "below the minimum threshold of 100 units.",
            "location": "Main Warehouse",
            "notify_admins": True,
            "notify_supervisors": True,
            "send_push_notification": True,
            "metadata": {
                "product_id": "P-001",
                "product_name": "Plastic Plates - Large",
                "current_stock": 50,
                "minimum_threshold": 100,
                "reorder_quantity": 500,
                "supplier": "Plastic Manufacturing Co.",
            },
            "tags": ["inventory", "low_stock", "warehouse"],
            "source_system": "warehouse_management",
            "created_by": "system",
        },
        {
            "alert_id": "ALERT-005",
            "alert_type": "visit",
            "category": "critical",
            "severity": "high",
            "priority": "high",
            "title": "Late Visit Alert",
            "message": "Visit to Customer ABC is 45 minutes late",
            "description": "Scheduled visit to Customer ABC is running 45 minutes behind schedule.",
            "visit_id": "VISIT-001",
            "delegate_id": "DEL-001",
            "delegate_name": "Sara Ahmed",
            "delegate_phone": "+201234567894",
            "delegate_email": "sara.ahmed@company.com",
            "customer_id": "CUST-002",
            "customer_name": "ABC Trading Company",
            "customer_address": "456 Business District, Cairo",
            "location": "Cairo Business District",
            "scheduled_time": now - timedelta(minutes=45),
            "actual_time": now - timedelta(minutes=45),
            "delay_minutes": 45,
            "grace_period_minutes": 15,
            "escalation_threshold_minutes": 30,
            "escalation_level": "escalated",
            "escalation_count": 1,
            "last_escalated_at": now - timedelta(minutes=15),
            "escalation_notes": "Customer has been notified of delay",
            "notify_admins": True,
            "notify_supervisors": True,
            "send_push_notification": True,
            "send_email_notification": True,
            "metadata": {
                "visit_type": "sales_call",
                "customer_contact": "+201234567895",
                "visit_duration": "2 hours",
                "visit_purpose": "Product demonstration",
            },
            "tags": ["visit", "late", "customer", "escalated"],
            "source_system": "visit_management",
            "created_by": "system",
        },
    ]
