"""
Simple runtimeframework example: pick a framework for a few targets and print a report.
"""
from runtimeframework.core import RuntimeFramework, RuntimeFrameworkService, Version
from runtimeframework.reporting import format_text_report


def main() -> None:
    available = [RuntimeFramework.parse(i) for i in ("net-2.0", "net-3.5", "net-4.8", "mono-4.0")]
    # A probed Mono install reports a more precise engine version
    available[-1].set_clr_version(Version(4, 0, 30319, 42000))

    service = RuntimeFrameworkService(available)
    service.initialize_service()

    targets = [
        RuntimeFramework.parse("net-2.0"),
        RuntimeFramework.parse("net-4.5.2"),
        RuntimeFramework.from_framework_name(".NETFramework,Version=v4.0,Profile=Client"),
    ]
    print(format_text_report(service, targets, title="runtimeframework Simple Example"))
    service.unload_service()


if __name__ == "__main__":
    main()
