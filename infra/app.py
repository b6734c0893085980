#!/usr/bin/env python3
"""CDK entrypoint.

Usage:
    cdk deploy
"""

import aws_cdk as cdk

from infra.trips_stack import TripsStack

app = cdk.App()
TripsStack(app, "KilometerTripsStack")
app.synth()
