#!/usr/bin/env python3
from saffira_infra.app import main

main()
