"""Receiver stream settings and consistency checks over them."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

__all__ = [
    "IpServer",
    "RtkSettings",
    "InsVsmSettings",
    "Settings",
    "check_uniqueness_of_ips",
    "check_uniqueness_of_ips_ports",
    "check_uniqueness_of_ips_vsm",
    "check_uniqueness_of_ips_ports_vsm",
    "auto_publish",
]

logger = logging.getLogger(__name__)


@dataclass
class IpServer:
    """An IP server of the receiver used for correction streams."""

    id: str = ""
    port: int = 0


@dataclass
class RtkSettings:
    """Correction stream settings."""

    ip_server: list[IpServer] = field(default_factory=list)


@dataclass
class InsVsmSettings:
    """Velocity sensor input settings."""

    ip_server: str = ""
    ip_server_port: int = 0


@dataclass
class Settings:
    """Driver settings relevant to stream allocation and publishing."""

    device_tcp_port: str = ""
    tcp_ip_server: str = ""
    tcp_port: int = 0
    udp_ip_server: str = ""
    udp_port: int = 0
    rtk: RtkSettings = field(default_factory=RtkSettings)
    ins_vsm: InsVsmSettings = field(default_factory=InsVsmSettings)
    auto_publish: bool = False
    configure_rx: bool = True
    publish_gpst: bool = False
    publish_navsatfix: bool = False
    publish_gpsfix: bool = False
    publish_pose: bool = False
    publish_diagnostics: bool = False
    publish_aimplusstatus: bool = False
    publish_galauthstatus: bool = False
    publish_gpgga: bool = False
    publish_gprmc: bool = False
    publish_gpgsa: bool = False
    publish_gpgsv: bool = False
    publish_measepoch: bool = False
    publish_pvtcartesian: bool = False
    publish_pvtgeodetic: bool = False
    publish_basevectorcart: bool = False
    publish_basevectorgeod: bool = False
    publish_poscovcartesian: bool = False
    publish_poscovgeodetic: bool = False
    publish_velcovcartesian: bool = False
    publish_velcovgeodetic: bool = False
    publish_atteuler: bool = False
    publish_attcoveuler: bool = False
    publish_insnavcart: bool = False
    publish_insnavgeod: bool = False
    publish_imusetup: bool = False
    publish_velsensorsetup: bool = False
    publish_exteventinsnavgeod: bool = False
    publish_exteventinsnavcart: bool = False
    publish_extsensormeas: bool = False
    publish_imu: bool = False
    publish_localization: bool = False
    publish_localization_ecef: bool = False
    publish_twist: bool = False
    publish_tf: bool = False
    publish_tf_ecef: bool = False


_AUTO_PUBLISH_FLAGS = (
    "publish_gpst",
    "publish_navsatfix",
    "publish_gpsfix",
    "publish_pose",
    "publish_diagnostics",
    "publish_aimplusstatus",
    "publish_galauthstatus",
    "publish_gpgga",
    "publish_gprmc",
    "publish_gpgsa",
    "publish_gpgsv",
    "publish_measepoch",
    "publish_pvtcartesian",
    "publish_pvtgeodetic",
    "publish_basevectorcart",
    "publish_basevectorgeod",
    "publish_poscovcartesian",
    "publish_poscovgeodetic",
    "publish_velcovcartesian",
    "publish_velcovgeodetic",
    "publish_atteuler",
    "publish_attcoveuler",
    "publish_insnavcart",
    "publish_insnavgeod",
    "publish_imusetup",
    "publish_velsensorsetup",
    "publish_exteventinsnavgeod",
    "publish_exteventinsnavcart",
    "publish_extsensormeas",
    "publish_imu",
    "publish_localization",
    "publish_localization_ecef",
    "publish_twist",
)


def _report(problems: list[str]) -> list[str]:
    for problem in problems:
        logger.error(problem)
    return problems


def check_uniqueness_of_ips(settings: Settings) -> list[str]:
    """Report IP servers claimed by more than one stream; returns the problems found."""
    problems: list[str] = []
    servers = settings.rtk.ip_server
    if settings.tcp_ip_server:
        if settings.tcp_ip_server == settings.udp_ip_server:
            problems.append(
                "stream_device.tcp.ip_server and stream_device.udp.ip_server "
                "cannot use the same IP server"
            )
        for number, server in enumerate(servers, start=1):
            if settings.tcp_ip_server == server.id:
                problems.append(
                    f"stream_device.tcp.ip_server and rtk_settings.ip_server_{number}"
                    ".id cannot use the same IP server"
                )
    if settings.udp_ip_server:
        for number, server in enumerate(servers, start=1):
            if settings.udp_ip_server == server.id:
                problems.append(
                    f"stream_device.udp.ip_server and rtk_settings.ip_server_{number}"
                    ".id cannot use the same IP server"
                )
    if len(servers) == 2 and servers[0].id and servers[0].id == servers[1].id:
        problems.append(
            "rtk_settings.ip_server_1.id and rtk_settings.ip_server_2.id "
            "cannot use the same IP server"
        )
    return _report(problems)


def check_uniqueness_of_ips_ports(settings: Settings) -> list[str]:
    """Report IP server ports claimed by more than one stream; returns the problems found."""
    problems: list[str] = []
    servers = settings.rtk.ip_server
    if settings.tcp_port != 0:
        if str(settings.tcp_port) == settings.device_tcp_port:
            problems.append("stream_device.tcp.port and device port cannot be the same")
        for number, server in enumerate(servers, start=1):
            if settings.tcp_port == server.port:
                problems.append(
                    f"stream_device.tcp.port and rtk_settings.ip_server_{number}"
                    ".port cannot be the same!"
                )
    if len(servers) == 2 and servers[0].port != 0 and servers[0].port == servers[1].port:
        problems.append(
            "rtk_settings.ip_server_1.port and rtk_settings.ip_server_2.port "
            "cannot be the same"
        )
    return _report(problems)


def check_uniqueness_of_ips_vsm(settings: Settings) -> list[str]:
    """Report a velocity-sensor IP server shared with another stream."""
    problems: list[str] = []
    vsm_server = settings.ins_vsm.ip_server
    if vsm_server:
        if settings.tcp_ip_server and settings.tcp_ip_server == vsm_server:
            problems.append(
                "stream_device.tcp.ip_server and ins_vsm.ip_server.id "
                "cannot use the same IP server"
            )
        if settings.udp_ip_server and settings.udp_ip_server == vsm_server:
            problems.append(
                "stream_device.udp.ip_server and ins_vsm.ip_server.id "
                "cannot use the same IP server"
            )
        for number, server in enumerate(settings.rtk.ip_server, start=1):
            if vsm_server == server.id:
                problems.append(
                    f"ins_vsm.ip_server.id and rtk_settings.ip_server_{number}"
                    ".id cannot use the same IP server"
                )
    return _report(problems)


def check_uniqueness_of_ips_ports_vsm(settings: Settings) -> list[str]:
    """Report a velocity-sensor IP server port shared with another stream."""
    problems: list[str] = []
    vsm_port = settings.ins_vsm.ip_server_port
    if vsm_port != 0:
        if str(vsm_port) == settings.device_tcp_port:
            problems.append("device port  and ins_vsm.ip_server.port cannot be the same")
        if settings.tcp_port != 0 and settings.tcp_port == vsm_port:
            problems.append(
                "stream_device.tcp.port and ins_vsm.ip_server.port cannot be the same"
            )
        if settings.udp_port != 0 and settings.udp_port == vsm_port:
            problems.append(
                "stream_device.udp.port and ins_vsm.ip_server.port cannot be the same"
            )
        for number, server in enumerate(settings.rtk.ip_server, start=1):
            if vsm_port == server.port:
                problems.append(
                    f"ins_vsm.ip_server.port and rtk_settings.ip_server_{number}"
                    ".port cannot use be same"
                )
    return _report(problems)


def auto_publish(settings: Settings) -> None:
    """Switch on every publisher when auto publishing a receiver that is not configured.

    ``publish_tf`` is only switched on when ``publish_tf_ecef`` is off. Auto
    publishing has no effect, apart from a warning, when the receiver is to be
    configured.
    """
    if not settings.auto_publish:
        return
    if settings.configure_rx:
        logger.warning("auto_publish has no effect if configure_rx is true.")
        return
    for flag in _AUTO_PUBLISH_FLAGS:
        setattr(settings, flag, True)
    if not settings.publish_tf_ecef:
        settings.publish_tf = True