#!/usr/bin/env python3

import aws_cdk as cdk

from janitor_stack import JanitorStack

app = cdk.App()
JanitorStack(
    app,
    "JanitorStack",
)

app.synth()
