"""Queue descriptor."""

from .nodes import ResourceSchema, block, integer, string, tags


def build() -> ResourceSchema:
    root = block(
        "queue",
        string("arn", computed=True),
        string("description"),
        string("name", required=True, force_new=True),
        string("pricing_plan", enum="PricingPlan", default="ON_DEMAND", force_new=True),
        block(
            "reservation_plan_settings",
            string("commitment", enum="Commitment", required=True),
            string("renewal_type", enum="RenewalType", required=True),
            integer("reserved_slots", minimum=1, required=True),
            sdk_type="ReservationPlanSettings",
            read_from="ReservationPlan",
            description="Only meaningful for RESERVED queues",
        ),
        string("status", enum="QueueStatus", default="ACTIVE"),
        tags(),
        string("type", computed=True),
        sdk_type="Queue",
    )
    return ResourceSchema("queue", "Queue", root, aliases=("aws_media_convert_queue", "queues"))
