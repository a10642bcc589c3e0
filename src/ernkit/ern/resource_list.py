"""ResourceList section: one SoundRecording per track and the front cover Image."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ernkit.domain.identifiers import format_iso_duration, technical_reference, xml_safe_url
from ernkit.domain.model import WORLDWIDE

from .inputs import (
    AUDIO_BIT_RATE,
    AUDIO_BITS_PER_SAMPLE,
    AUDIO_CHANNELS,
    AUDIO_CODEC,
    AUDIO_SAMPLING_RATE,
)
from .party_list import UNKNOWN_PARTY_NAME, append_display_artist
from .xml import sub, sub_if

if TYPE_CHECKING:
    from lxml import etree

    from ernkit.domain.contributors import MappedContributor

    from .context import BuildContext
    from .inputs import ImageResource, ProductTrack, SoundRecordingResource

SOUND_RECORDING_TYPE = "MusicalWorkSoundRecording"
FRONT_COVER_IMAGE = "FrontCoverImage"


def build_resource_list(root: etree._Element, context: BuildContext) -> etree._Element:
    resource_list = sub(root, "ResourceList")
    for track in context.product.tracks:
        resource = context.resources.sound_recording(track.resource_reference)
        if resource is None:
            continue
        build_sound_recording(resource_list, context, track, resource)
    build_image(resource_list, context, context.resources.image)
    return resource_list


def build_sound_recording(
    parent: etree._Element,
    context: BuildContext,
    track: ProductTrack,
    resource: SoundRecordingResource,
) -> etree._Element:
    policy = context.policy
    recording = sub(parent, "SoundRecording")
    artist = track.display_artist or context.product.display_artist

    if policy.legacy_resource_ids:
        sub(recording, "SoundRecordingType", SOUND_RECORDING_TYPE)
        sub(sub(recording, "SoundRecordingId"), "ISRC", resource.isrc)
        sub(recording, "ResourceReference", resource.resource_reference)
        _title(recording, "ReferenceTitle", track.title, track.subtitle)
        sub_if(recording, "LanguageOfPerformance", track.language or context.product.language)
        sub(recording, "Duration", format_iso_duration(track.duration_seconds))

        details = sub(recording, "SoundRecordingDetailsByTerritory")
        sub(details, "TerritoryCode", WORLDWIDE)
        title = sub(details, "Title", TitleType="DisplayTitle")
        sub(title, "TitleText", track.title)
        sub_if(title, "SubTitle", track.subtitle)
        append_display_artist(details, context, artist)
        _contributors(details, context, track.contributors)
        sub_if(details, "LabelName", context.product.label)
        _p_line(details, context)
        sub(details, "ParentalWarningType", context.product.parental_warning)
        technical = sub(details, "TechnicalSoundRecordingDetails")
        _audio_technical_details(technical, context, resource)
        return recording

    sub(recording, "ResourceReference", resource.resource_reference)
    sub(recording, "Type", SOUND_RECORDING_TYPE)
    sub(sub(recording, "ResourceId"), "ISRC", resource.isrc)
    sub(recording, "DisplayTitleText", track.title)
    _title(recording, "DisplayTitle", track.title, track.subtitle)
    sub(recording, "DisplayArtistName", artist or UNKNOWN_PARTY_NAME)
    append_display_artist(recording, context, artist)
    _contributors(recording, context, track.contributors)
    _p_line(recording, context)
    sub(recording, "Duration", format_iso_duration(track.duration_seconds))
    sub(recording, "ParentalWarningType", context.product.parental_warning)
    sub_if(recording, "LanguageOfPerformance", track.language or context.product.language)
    technical = sub(recording, "TechnicalDetails")
    _audio_technical_details(technical, context, resource)
    return recording


def build_image(
    parent: etree._Element, context: BuildContext, image: ImageResource
) -> etree._Element:
    policy = context.policy
    element = sub(parent, "Image")
    proprietary_id = f"{context.product.upc}_IMG"
    namespace = f"DPID:{context.config.sender_party_id}"

    if policy.legacy_resource_ids:
        sub(element, "ImageType", FRONT_COVER_IMAGE)
        sub(sub(element, "ImageId"), "ProprietaryId", proprietary_id, Namespace=namespace)
        sub(element, "ResourceReference", image.resource_reference)
        details = sub(element, "ImageDetailsByTerritory")
        sub(details, "TerritoryCode", WORLDWIDE)
        technical = sub(details, "TechnicalImageDetails")
    else:
        sub(element, "ResourceReference", image.resource_reference)
        sub(element, "Type", FRONT_COVER_IMAGE)
        sub(sub(element, "ResourceId"), "ProprietaryId", proprietary_id, Namespace=namespace)
        technical = sub(element, "TechnicalDetails")

    sub(
        technical,
        "TechnicalResourceDetailsReference",
        technical_reference(image.resource_reference),
    )
    if policy.is_provided_in_delivery:
        sub(technical, "IsProvidedInDelivery", True)
    sub(technical, "ImageCodecType", image.codec)
    sub(technical, "ImageHeight", image.height)
    sub(technical, "ImageWidth", image.width)
    sub(technical, "ImageResolution", image.resolution)
    _file(technical, context, image.file_name, image.url, image.md5)
    return element


def _title(parent: etree._Element, tag: str, text: str, subtitle: str | None) -> None:
    title = sub(parent, tag)
    sub(title, "TitleText", text)
    sub_if(title, "SubTitle", subtitle)


def _p_line(parent: etree._Element, context: BuildContext) -> None:
    p_line = sub(parent, "PLine")
    sub(p_line, "Year", context.year)
    sub(p_line, "PLineText", context.product.p_line(context.year))


def _contributors(
    parent: etree._Element,
    context: BuildContext,
    contributors: tuple[MappedContributor, ...],
) -> None:
    for contributor in contributors:
        tag = contributor.element_type.value
        element = sub(parent, tag)
        if contributor.sequence_number is not None:
            element.set("SequenceNumber", str(contributor.sequence_number))
        if context.policy.party_list:
            sub(element, "ContributorPartyReference", context.party(contributor.party_name))
        else:
            sub(sub(element, "PartyName"), "FullName", contributor.party_name)
        if contributor.user_defined:
            sub(element, f"{tag}Role", "UserDefined", UserDefinedValue=contributor.role)
        else:
            sub(element, f"{tag}Role", contributor.role)


def _audio_technical_details(
    technical: etree._Element,
    context: BuildContext,
    resource: SoundRecordingResource,
) -> None:
    sub(
        technical,
        "TechnicalResourceDetailsReference",
        technical_reference(resource.resource_reference),
    )
    if context.policy.is_provided_in_delivery:
        sub(technical, "IsProvidedInDelivery", True)
    sub(technical, "AudioCodecType", AUDIO_CODEC)
    sub(technical, "BitRate", AUDIO_BIT_RATE)
    sub(technical, "NumberOfChannels", AUDIO_CHANNELS)
    sub(technical, "SamplingRate", AUDIO_SAMPLING_RATE)
    sub(technical, "BitsPerSample", AUDIO_BITS_PER_SAMPLE)
    if resource.has_preview:
        preview = sub(technical, "PreviewDetails")
        sub(preview, "StartPoint", int(resource.preview_start or 0))
        sub(preview, "Duration", format_iso_duration(resource.preview_duration))
        sub(preview, "ExpressionType", "Instructive")
    _file(technical, context, resource.file_name, resource.url, resource.md5)


def _file(
    parent: etree._Element,
    context: BuildContext,
    file_name: str,
    url: str | None,
    md5: str,
) -> None:
    file = sub(parent, "File")
    sub(file, "FileName", file_name)
    sub(file, "FilePath", f"{context.policy.file_path_prefix}{file_name}")
    sub_if(file, context.policy.uri_element, xml_safe_url(url))
    hash_sum = sub(file, "HashSum")
    sub(hash_sum, "HashSumAlgorithmType", "MD5")
    sub(hash_sum, "HashSum", md5)
