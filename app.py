#!/usr/bin/env python3

import aws_cdk as cdk

from booking_stack import FlightBookingStack

app = cdk.App()
FlightBookingStack(
    app,
    "FlightBookingStack",
)

app.synth()
