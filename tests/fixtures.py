import json

SUBPROCESSOR_URI = "/redfish/v1/Systems/1/Processors/1/SubProcessors/1"

SUBPROCESSOR = {
    "@odata.context": "/redfish/v1/$metadata#Processor.Processor",
    "@odata.id": SUBPROCESSOR_URI,
    "@odata.type": "#Processor.v1_10_0.Processor",
    "Id": "1",
    "Name": "Core 1",
    "MaxSpeedMHz": 3700,
    "ProcessorType": "Core",
    "TotalThreads": 2,
    "Status": {"State": "Enabled", "Health": "OK"},
    "Links": {
        "Chassis": {"@odata.id": "/redfish/v1/Chassis/1"},
        "ConnectedProcessors": [
            {"@odata.id": "/redfish/v1/Systems/1/Processors/2"},
            {"@odata.id": "/redfish/v1/Systems/1/Processors/3"},
        ],
    },
}


def subprocessor_body(**overrides) -> bytes:
    data = dict(SUBPROCESSOR)
    for key, value in overrides.items():
        if value is ...:
            data.pop(key, None)
        else:
            data[key] = value
    return json.dumps(data).encode("utf-8")
