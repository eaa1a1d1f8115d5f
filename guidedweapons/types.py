"""Weapon record: the rows of the guided weapons table and their JSON form."""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from functools import lru_cache
from typing import Any


@dataclass(frozen=True)
class WeaponField:
    """How one weapon attribute is named in the table and in JSON output."""

    attr: str
    csv: str
    json: str
    omitempty: bool = False


def _tag(csv: str, json_key: str, omitempty: bool = False) -> Any:
    return field(
        default="",
        metadata={"csv": csv, "json": json_key, "omitempty": omitempty},
    )


def _opt(csv: str, json_key: str) -> Any:
    return _tag(csv, json_key, omitempty=True)


@dataclass
class Weapon:
    """All parameters of a single guided weapon, kept as table text."""

    name: str = _tag("Name", "name")
    mass: str = _tag("Mass", "mass_kg")
    mass_at_end_of_booster_burn: str = _tag("Mass at end of booster burn", "mass_end_booster_burn_kg")
    mass_at_end_of_sustainer_burn: str = _tag("Mass at end of sustainer burn", "mass_end_sustainer_burn_kg")
    caliber: str = _tag("Calibre", "caliber_mm")
    length: str = _tag("Length", "length_m")
    force_exerted_by_booster: str = _tag("Force exerted by booster", "force_exerted_by_booster_N")
    burn_time_of_booster: str = _tag("Burn time of booster", "burn_time_of_booster_s")
    raw_acceleration_at_ignition: str = _tag("Raw acceleration at ignition", "raw_acceleration_at_ignition_ms2")
    specific_impulse_of_booster: str = _tag("Specific impulse of booster", "specific_impulse_of_booster_s")
    delta_v_of_booster: str = _tag("ΔV of booster", "delta_v_of_booster_ms")
    booster_start_delay: str = _tag("Booster start delay", "booster_start_delay_s")
    force_exerted_by_sustainer: str = _tag("Force exerted by sustainer", "force_exerted_by_sustainer_N")
    burn_time_of_sustainer: str = _tag("Burn time of sustainer", "burn_time_of_sustainer_s")
    specific_impulse_of_sustainer: str = _tag("Specific impulse of sustainer", "specific_impulse_of_sustainer_s")
    delta_v_of_sustainer: str = _tag("ΔV of sustainer", "delta_v_of_sustainer_ms")
    total_delta_v: str = _tag("Total ΔV", "total_delta_v_ms")
    explosive_mass: str = _tag("Explosive mass", "explosive_mass_kg_tnt")
    warhead: str = _tag("Warhead:", "warhead")
    penetration: str = _tag("Penetration", "penetration_mm")
    proximity_fuse: str = _tag("Proximity fuse:", "proximity_fuse")
    proximity_fuse_arming_distance: str = _tag("Proximity fuse arming distance", "proximity_fuse_arming_distance")
    proximity_fuse_arming_distance_from_target: str = _tag(
        "Proximity fuse arming distance from target", "proximity_fuse_arming_distance_from_target"
    )
    proximity_fuse_range: str = _tag("Proximity fuse range", "proximity_fuse_range_m")
    proximity_fuse_shell_detection: str = _tag(
        "Proximity fuse shell detection (80-200 mm):", "proximity_fuse_shell_detection"
    )
    proximity_fuse_minimum_altitude: str = _tag("Proximity fuse minimum altitude", "proximity_fuse_minimum_atitude")
    proximity_fuse_delay: str = _tag("Proximity fuse delay", "proximity_fuse_delay_s")
    impact_fuse_sensitivity: str = _tag("Impact fuse sensitivity", "impact_fuse_sensitivity_mm")
    impact_fuse_delay: str = _tag("Impact fuse delay", "impact_fuse_delay_m")
    guidance_type: str = _opt("Guidance type", "guidance_type")
    guidance_start_delay: str = _opt("Guidance start delay", "guidance_start_delay_s")
    guidance_duration: str = _opt("Guidance duration", "guidance_duration_s")
    guidance_range: str = _opt("Guidance range", "guidance_range_km")
    guidance_fov: str = _opt("Guidance FOV", "guidance_fov_deg")
    guidance_max_lead: str = _opt("Guidance max lead", "guidance_max_lead_deg")
    guidance_launch_sector: str = _opt("Guidance launch sector", "guidance_launch_sector_deg")
    aim_tracking_sensitivity: str = _opt("Aim tracking sensitivity", "aim_tracking_sensitivity")
    seeker_warm_up_time: str = _opt("Seeker warm up time", "seeker_warm_up_time_s")
    seeker_search_duration: str = _opt("Seeker search duration", "seeker_search_duration_s")
    seeker_range: str = _opt("Seeker range", "seeker_range_km")
    field_of_view: str = _opt("Field of view", "field_of_view_deg")
    gimbal_limit: str = _opt("Gimbal limit", "gimbal_limit_deg")
    track_rate: str = _opt("Track rate", "track_rate_deg_sec")
    uncaged_seeker_before_launch: str = _opt("Uncaged seeker before launch", "uncaged_seeker_before_launch")
    max_lock_angle_before_launch: str = _opt("Maximum lock angle before launch", "max_lock_angle_before_launch_deg")
    min_angle_of_incidence_to_sun: str = _opt("Minimum angle of incidence to Sun", "min_angle_of_incidence_to_sun_deg")
    baseline_lock_range_rear: str = _opt("Baseline lock range rear-aspect", "baseline_lock_range_rear_km")
    baseline_lock_range_all: str = _opt("Baseline lock range all-aspect", "baseline_lock_range_all_km")
    baseline_lock_range_ground: str = _opt("Baseline lock range (ground)", "baseline_lock_range_ground_km")
    baseline_lock_range_target: str = _opt("Baseline lock range (target)", "baseline_lock_range_target_km")
    baseline_flare_detection: str = _opt("Baseline flare detection", "baseline_flare_detection_km")
    baseline_ircm_detection: str = _opt("Baseline IRCM detection", "baseline_ircm_detection_km")
    baseline_dircm_detection: str = _opt("Baseline DIRCM detection", "baseline_dircm_detection_km")
    baseline_ldircm_detection: str = _opt("Baseline LDIRCM detection", "baseline_ldircm_detection_km")
    baseline_head_on_lock_range: str = _opt("Baseline head-on lock range", "baseline_head_on_lock_range_km")
    max_lock_range_hard_limit: str = _opt("Maximum lock range", "max_lock_range_km")
    irccm: str = _opt("IRCCM", "irccm")
    irccm_type: str = _opt("IRCCM type", "irccm_type")
    irccm_field_of_view: str = _opt("IRCCM field of view", "irccm_field_of_view_deg")
    irccm_rejection_threshold: str = _opt("IRCCM rejection threshold", "irccm_rejection_threshold")
    irccm_reaction_time: str = _opt("IRCCM reaction time", "irccm_reaction_time_s")
    min_target_size: str = _opt("Minimum target size", "min_target_size_m")
    max_break_lock_time: str = _opt("Maximum break lock time", "max_break_lock_time_s")
    can_be_slaved_to_radar: str = _opt("Can be slaved to radar", "can_be_slaved_to_radar")
    can_lock_after_launch: str = _opt("Can lock after launch", "can_lock_after_launch")
    band: str = _opt("Band", "band")
    angular_speed_rejection_thresh: str = _opt("Angular speed rejection", "angular_speed_rejection_deg_s")
    accel_rejection_thresh_range: str = _opt("Acceleration rejection", "accel_rejection_m_s2")
    inertial_guidance_drift_speed: str = _opt("Inertial guidance drift", "inertial_guidance_drift_m_s")
    datalink: str = _opt("Datalink", "datalink")
    can_datalink_reconnect: str = _opt("Can datalink reconnect", "can_datalink_reconnect")
    sidelobe_attenuation: str = _opt("Sidelobe attenuation", "sidelobe_attenuation")
    transmitter_power: str = _opt("Transmitter power", "transmitter_power")
    transmitter_half_sensitivity: str = _opt("Transmitter half sensitivity", "transmitter_half_sensitivity")
    transmitter_sidelobe_sens: str = _opt("Transmitter sidelobe sensitivity", "transmitter_sidelobe_sensitivity")
    receiver_half_sensitivity: str = _opt("Receiver half sensitivity", "receiver_half_sensitivity")
    receiver_sidelobe_sens: str = _opt("Receiver sidelobe sensitivity", "receiver_sidelobe_sensitivity")
    distance_min_value: str = _opt("Distance min", "distance_min_m")
    distance_max_value: str = _opt("Distance max", "distance_max_km")
    distance_width: str = _opt("Distance width", "distance_width_m")
    distance_ref_width: str = _opt("Distance ref width", "distance_ref_width_m")
    distance_min_signal_gate: str = _opt("Distance min signal gate", "distance_min_signal_gate_m")
    distance_gate_search_range: str = _opt("Distance gate search", "distance_gate_search_m")
    distance_gate_alpha_filter: str = _opt("Distance gate alpha", "distance_gate_alpha")
    distance_gate_beta_filter: str = _opt("Distance gate beta", "distance_gate_beta")
    doppler_speed_min_value: str = _opt("Doppler speed min", "doppler_speed_min_m_s")
    doppler_speed_max_value: str = _opt("Doppler speed max", "doppler_speed_max_m_s")
    doppler_speed_width: str = _opt("Doppler speed width", "doppler_speed_width_m_s")
    doppler_speed_ref_width: str = _opt("Doppler speed ref width", "doppler_speed_ref_width_m_s")
    doppler_speed_min_signal_gate: str = _opt("Doppler speed min gate", "doppler_speed_min_gate_m_s")
    doppler_speed_gate_search: str = _opt("Doppler speed gate search", "doppler_speed_gate_search_m_s")
    doppler_speed_gate_alpha: str = _opt("Doppler speed gate alpha", "doppler_speed_gate_alpha")
    doppler_speed_gate_beta: str = _opt("Doppler speed gate beta", "doppler_speed_gate_beta")
    proportional_nav_multiplier: str = _opt("Proportional nav multiplier", "proportional_nav_multiplier")
    base_indicated_air_speed: str = _opt("Base air speed", "base_air_speed_m_s")
    pid_proportional_term: str = _opt("PID proportional", "pid_proportional")
    pid_integral_term: str = _opt("PID integral", "pid_integral")
    pid_integral_term_limit: str = _opt("PID integral term limit", "pid_integral_limit")
    pid_derivative_term: str = _opt("PID derivative", "pid_derivative")
    orienting_phase: str = _opt("Orienting phase", "orienting_phase")
    orienting_start_delay: str = _opt("Orienting start delay", "orienting_start_delay")
    orienting_control_time: str = _opt("Orienting control time", "orienting_control_time")
    orienting_elevation_addition: str = _opt("Orienting elevation addition", "orienting_elevation_addition")
    drag_coefficient_multiplier: str = _opt("Drag coefficient multiplier", "drag_coefficient_multiplier")
    wing_area_multiplier: str = _opt("Wing area multiplier", "wing_area_multiplier")
    start_speed: str = _opt("Start speed", "start_speed")
    maximum_speed: str = _opt("Maximum speed", "maximum_speed")
    minimum_range: str = _opt("Minimum range", "minimum_range")
    flight_range_limit: str = _opt("Flight range limit", "flight_range_limit")
    maximum_g_load: str = _opt("Maximum G-load", "maximum_g_load")
    maximum_fin_angle_of_attack: str = _opt("Maximum fin angle of attack", "maximum_fin_angle_of_attack")
    maximum_fin_lateral_acceleration: str = _opt(
        "Maximum fin lateral acceleration", "maximum_fin_lateral_acceleration"
    )
    maximum_lateral_acceleration: str = _opt("Maximum lateral acceleration", "maximum_lateral_acceleration")
    maximum_aoa: str = _opt("Maximum AOA", "maximum_aoa")
    thrust_vectoring: str = _opt("Thrust vectoring", "thrust_vectoring")
    thrust_vectoring_angle: str = _opt("Thrust vectoring angle", "thrust_vectoring_angle")
    maximum_launch_angle_horizontal: str = _opt(
        "Maximum launch angle (horizontally)", "maximum_launch_angle_horizontal"
    )
    maximum_launch_angle_vertical: str = _opt("Maximum launch angle (vertically)", "maximum_launch_angle_vertical")
    maximum_axis_values: str = _opt("Maximum axis values", "maximum_axis_values")
    statcard_speed: str = _opt("Maximum statcard (useless) speed", "statcard_speed")
    statcard_launch_range: str = _opt("Maximum statcard (useless) launch range", "statcard_launch_range")
    statcard_guaranteed_range: str = _opt("Statcard (useless) guaranteed range", "statcard_guaranteed_range")
    statcard_g_load: str = _opt("Maximum statcard (useless) G-load", "statcard_g_load")
    flight_time_until_guidance_starts: str = _opt(
        "Flight time until guidance starts (delay)", "flight_time_until_guidance_starts"
    )
    flight_time_when_pull_limit_x: str = _opt(
        "Flight time when pull limit reaches x%", "flight_time_when_pull_limit_x"
    )
    flight_time_when_pull_limit_100: str = _opt(
        "Flight time when pull limit reaches 100%", "flight_time_when_pull_limit_100"
    )
    eta_to_impact_when_prop_multiplier: str = _opt(
        "ETA to impact when prop multiplier reaches x%", "eta_to_impact_when_prop_multiplier"
    )
    loft: str = _opt("Loft", "loft")
    loft_angle: str = _opt("Loft angle", "loft_angle")
    target_elevation: str = _opt("Target elevation", "target_elevation")
    maximum_target_angular_change: str = _opt("Maximum target angular change", "maximum_target_angular_change")
    has_tracer_in_tail: str = _opt("Has a tracer in its tail", "has_tracer_in_tail")
    sea_skimming: str = _opt("Sea skimming", "sea_skimming")
    skim_altitude: str = _opt("Skim altitude", "skim_altitude")
    attack_altitude: str = _opt("Attack altitude", "attack_altitude")
    additional_notes: str = _tag("Additional Notes:", "additional_notes")

    def to_dict(self) -> dict[str, str]:
        """Return the JSON object for this weapon, leaving out empty optional values."""
        result: dict[str, str] = {}
        for spec in weapon_fields():
            value = getattr(self, spec.attr)
            if spec.omitempty and value == "":
                continue
            result[spec.json] = value
        return result


@lru_cache(maxsize=None)
def weapon_fields() -> tuple[WeaponField, ...]:
    """Return the field descriptions of :class:`Weapon`, in declaration order."""
    return tuple(
        WeaponField(
            attr=f.name,
            csv=f.metadata["csv"],
            json=f.metadata["json"],
            omitempty=f.metadata["omitempty"],
        )
        for f in fields(Weapon)
    )